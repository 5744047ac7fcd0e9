"""
Position value type.
"""

from typing import NamedTuple

from .constants import BOARD_WIDTH, BOARD_HEIGHT, Direction


class Position(NamedTuple):
    """An (x, y) cell coordinate. Immutable, so it is safe to share."""

    x: int
    y: int

    def step(self, direction: Direction) -> "Position":
        """Return the neighbouring cell one unit away in `direction`."""
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)

    def in_bounds(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height
