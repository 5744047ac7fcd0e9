"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Optional, Tuple

from .constants import BOARD_WIDTH, BOARD_HEIGHT, INITIAL_BODY, INITIAL_DIRECTION, Direction
from .position import Position


class Snake:
    """
    Represents the snake on the board.

    The body is kept as a deque of Position from head (index 0) to tail.
    `direction` is the heading the next move() will use. A turn is refused when
    it reverses either that heading or the heading of the last completed move,
    so several turns queued inside one tick can never fold the head back onto
    the neck.
    """

    def __init__(
        self,
        positions: Optional[Iterable[Tuple[int, int]]] = None,
        direction: Direction = INITIAL_DIRECTION,
    ):
        if positions is None:
            positions = INITIAL_BODY
        self._body = deque(Position(*cell) for cell in positions)
        if not self._body:
            raise ValueError("A snake needs at least one segment.")
        self._direction = direction
        self._last_moved = direction

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self._body[0]

    @property
    def tail(self) -> Position:
        return self._body[-1]

    @property
    def body(self) -> Tuple[Position, ...]:
        """Head-first copy of the body segments."""
        return tuple(self._body)

    @property
    def direction(self) -> Direction:
        return self._direction

    def get_head(self) -> Position:
        return self.head

    def get_body(self) -> Tuple[Position, ...]:
        return self.body

    def move(self) -> None:
        """Advance one cell in the current direction, dropping the tail."""
        self._body.appendleft(self.head.step(self._direction))
        self._body.pop()
        self._last_moved = self._direction

    def grow(self) -> None:
        """Append a copy of the tail; it separates on the next move."""
        self._body.append(self.tail)

    def set_direction(self, new_direction) -> None:
        """
        Queue a new heading for the next move.

        A direct reversal (up/down, left/right) of the current heading or of
        the last move is ignored.
        """
        new_direction = Direction.parse(new_direction)
        if new_direction in (self._direction.opposite, self._last_moved.opposite):
            return
        self._direction = new_direction

    def check_collision(self) -> bool:
        """True if the head is off the board or on another segment."""
        head = self.head
        if not head.in_bounds(BOARD_WIDTH, BOARD_HEIGHT):
            return True
        return any(segment == head for segment in list(self._body)[1:])

    def occupies(self, cell) -> bool:
        return Position(*cell) in self._body

    def __len__(self):
        return len(self._body)

    def __repr__(self):
        return f"<Snake head={tuple(self.head)}, length={len(self)}, direction={self._direction.name}>"
