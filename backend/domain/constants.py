"""
Game constants for the snake game.
"""

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """
    Movement directions in screen coordinates: (0, 0) is the top-left cell,
    so UP decreases y and DOWN increases it.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, value) -> "Direction":
        """
        Accept a Direction or its name in any case ("up", "RIGHT", ...).

        Raises:
            ValueError: if the value names no direction.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction {value!r}") from None


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = frozenset(Direction)

# Board settings
BOARD_SIZE = 24
BOARD_WIDTH = BOARD_SIZE
BOARD_HEIGHT = BOARD_SIZE

# Tick period in milliseconds
MOVE_INTERVAL = 200

# Starting snake, head first
INITIAL_BODY = ((12, 12), (11, 12), (10, 12), (9, 12))
INITIAL_DIRECTION = Direction.RIGHT

# Rejection-sampling attempts before food placement falls back to
# choosing among the free cells directly
MAX_RELOCATE_ATTEMPTS = 100

# Store key for the persisted high score
HIGH_SCORE_KEY = "snakeHighScore"
