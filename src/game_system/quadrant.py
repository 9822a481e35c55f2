"""
Quadrant - the four tappable regions of the game face
"""

import enum
from typing import Optional


class Quadrant(enum.Enum):
    """
    One of the four on-screen regions.

    Values are stable ordinals (0-3) used by the presentation layer to
    look up colors and screen rects.
    """
    TOP_LEFT = 0
    TOP_RIGHT = 1
    BOTTOM_LEFT = 2
    BOTTOM_RIGHT = 3

    @classmethod
    def from_grid(cls, row: int, column: int) -> Optional['Quadrant']:
        """
        Get quadrant for a 2x2 grid cell.

        Args:
            row: 0 for top, 1 for bottom
            column: 0 for left, 1 for right

        Returns:
            Quadrant for the cell, or None if outside the grid
        """
        if row not in (0, 1) or column not in (0, 1):
            return None
        return cls(row * 2 + column)

    @property
    def row(self) -> int:
        return self.value // 2

    @property
    def column(self) -> int:
        return self.value % 2


QUADRANTS = tuple(Quadrant)
