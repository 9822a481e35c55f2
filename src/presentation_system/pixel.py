#!/usr/bin/env python3
"""
Pixel class - Library independent color representation

Packs RGB into an int so colors can be stored, compared and hashed cheaply,
while still converting to the (r, g, b) tuples pygame draws with.
"""
from typing import Tuple


class Pixel(int):
    """Custom color class that packs RGB into integer - zero overhead

    Usage:
        pixel = Pixel(255, 0, 0)        # Red pixel
        pixel = Pixel(0xFF0000)         # Red pixel from int
        print(pixel.r, pixel.g, pixel.b)  # Access RGB components
        surface.fill(pixel.rgb)         # Hand to pygame
    """

    def __new__(cls, r: int, g: int = None, b: int = None) -> 'Pixel':
        """Create pixel from RGB values or existing int

        Args:
            r: Red component (0-255) OR packed color integer
            g: Green component (0-255) OR None if r is packed color
            b: Blue component (0-255) OR None if r is packed color
        """
        if g is None and b is None:
            return int.__new__(cls, r & 0xFFFFFF)
        elif g is None or b is None:
            # Invalid - if providing RGB, must provide all three
            raise ValueError("Must provide either just int value or all three RGB values")
        else:
            return int.__new__(cls, ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF))

    @property
    def r(self) -> int:
        """Red component (0-255)"""
        return (self >> 16) & 0xFF

    @property
    def g(self) -> int:
        """Green component (0-255)"""
        return (self >> 8) & 0xFF

    @property
    def b(self) -> int:
        """Blue component (0-255)"""
        return self & 0xFF

    @property
    def rgb(self) -> Tuple[int, int, int]:
        """Color as an (r, g, b) tuple"""
        return (self.r, self.g, self.b)

    def blend(self, other: 'Pixel', amount: float) -> 'Pixel':
        """Linear interpolation towards another color

        Args:
            other: Target color
            amount: 0.0 returns self, 1.0 returns other (clamped)

        Returns:
            Interpolated Pixel
        """
        amount = max(0.0, min(1.0, amount))
        return Pixel(
            round(self.r + (other.r - self.r) * amount),
            round(self.g + (other.g - self.g) * amount),
            round(self.b + (other.b - self.b) * amount),
        )

    def __repr__(self) -> str:
        return f"Pixel(r={self.r}, g={self.g}, b={self.b})"

    def __str__(self) -> str:
        return f"Pixel({self.r}, {self.g}, {self.b})"
