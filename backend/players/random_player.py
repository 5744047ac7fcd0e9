"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import VALID_MOVES, Direction
from domain.controls import DIRECTION_KEYS
from domain.game_state import GameState
from domain.position import Position
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a valid direction that avoids walls and self-collisions.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random

    def get_move(self, game_state: GameState) -> Optional[str]:
        body = game_state.snake_body
        head = body[0]

        # Reversing is ignored by the snake, so never offer it
        candidates = sorted(
            (d for d in VALID_MOVES if d is not game_state.direction.opposite),
            key=lambda d: d.name,
        )

        # Filter out moves that:
        # 1. Hit walls
        # 2. Hit own body (except tail, which will move)
        safe_moves: List[Direction] = []
        for direction in candidates:
            new_head: Position = head.step(direction)
            if not new_head.in_bounds(game_state.width, game_state.height):
                continue
            if new_head in body[:-1]:
                continue
            safe_moves.append(direction)

        # If no valid moves, just return a random move (we'll die anyway)
        if not safe_moves:
            return DIRECTION_KEYS[self._rng.choice(candidates)]

        return DIRECTION_KEYS[self._rng.choice(safe_moves)]
