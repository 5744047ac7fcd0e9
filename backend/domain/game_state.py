"""
GameState entity - a snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .constants import BOARD_WIDTH, BOARD_HEIGHT, Direction
from .position import Position


@dataclass(frozen=True)
class GameState:
    """
    A read-only snapshot handed to renderers and players.

    Attributes:
        snake_body: tuple of Position, head first
        direction: heading the snake will use on the next tick
        food: position of the food
        score, high_score: current and best score
        is_game_over, is_paused: status flags
        width, height: board dimensions
    """

    snake_body: Tuple[Position, ...]
    direction: Direction
    food: Position
    score: int
    high_score: int
    is_game_over: bool
    is_paused: bool
    width: int = BOARD_WIDTH
    height: int = BOARD_HEIGHT

    @property
    def head(self) -> Position:
        return self.snake_body[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake body
        H = snake head
        Row 0 is at the top, with x-axis labels at the bottom.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        fx, fy = self.food
        board[fy][fx] = 'F'

        for x, y in self.snake_body[1:]:
            if 0 <= x < self.width and 0 <= y < self.height:
                board[y][x] = 'S'

        hx, hy = self.head
        if 0 <= hx < self.width and 0 <= hy < self.height:
            board[hy][hx] = 'H'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]

        # x labels are printed mod 10 to keep the columns aligned
        result.append("   " + " ".join(str(x % 10) for x in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation; positions become [x, y] lists."""
        return {
            "snake_body": [list(cell) for cell in self.snake_body],
            "direction": self.direction.name,
            "food": list(self.food),
            "score": self.score,
            "high_score": self.high_score,
            "is_game_over": self.is_game_over,
            "is_paused": self.is_paused,
            "width": self.width,
            "height": self.height,
        }

    def __repr__(self):
        return (
            f"<GameState head={tuple(self.head)}, length={len(self.snake_body)}, "
            f"food={tuple(self.food)}, score={self.score}>"
        )
