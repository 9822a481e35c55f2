"""
Screen geometry and colors for the four quadrants
"""

from typing import Dict, Optional, Tuple

import pygame

from game_system.quadrant import Quadrant
from .pixel import Pixel


# (base, highlight) per quadrant
QUADRANT_COLORS: Dict[Quadrant, Tuple[Pixel, Pixel]] = {
    Quadrant.TOP_LEFT: (Pixel(0, 110, 40), Pixel(80, 255, 120)),       # Green
    Quadrant.TOP_RIGHT: (Pixel(130, 10, 10), Pixel(255, 80, 80)),      # Red
    Quadrant.BOTTOM_LEFT: (Pixel(140, 120, 0), Pixel(255, 240, 90)),   # Yellow
    Quadrant.BOTTOM_RIGHT: (Pixel(10, 40, 140), Pixel(90, 150, 255)),  # Blue
}

BACKGROUND = Pixel(0, 0, 0)
SCORE_BACKGROUND = Pixel(20, 20, 20)
SCORE_TEXT = Pixel(255, 255, 255)


class QuadrantLayout:
    """
    Splits a square surface into a 2x2 grid separated by a gap.

    Example:
        layout = QuadrantLayout(size=400, gap=6)
        layout.rect_for(Quadrant.TOP_LEFT)   # Rect(0, 0, 197, 197)
        layout.quadrant_at((390, 10))        # Quadrant.TOP_RIGHT
        layout.quadrant_at((200, 200))       # None (inside the gap)
    """

    def __init__(self, size: int, gap: int = 0):
        self.size = size
        self.gap = gap
        self.cell = (size - gap) // 2
        self._rects: Dict[Quadrant, pygame.Rect] = {
            quadrant: pygame.Rect(
                quadrant.column * (self.cell + gap),
                quadrant.row * (self.cell + gap),
                self.cell,
                self.cell,
            )
            for quadrant in Quadrant
        }

    @property
    def center(self) -> Tuple[int, int]:
        return (self.size // 2, self.size // 2)

    def rect_for(self, quadrant: Quadrant) -> pygame.Rect:
        return self._rects[quadrant]

    def quadrant_at(self, pos: Tuple[int, int]) -> Optional[Quadrant]:
        """Hit-test a surface position; None for gaps and outside the face"""
        x, y = pos
        if not (0 <= x < self.size and 0 <= y < self.size):
            return None

        stride = self.cell + self.gap
        column, x_in_cell = divmod(x, stride)
        row, y_in_cell = divmod(y, stride)
        if x_in_cell >= self.cell or y_in_cell >= self.cell:
            return None
        return Quadrant.from_grid(row, column)
