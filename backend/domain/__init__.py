"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (storage, rendering, input devices).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, Direction,
    BOARD_SIZE, MOVE_INTERVAL, INITIAL_BODY, HIGH_SCORE_KEY,
)
from .position import Position
from .food import Food
from .snake import Snake
from .controls import Action, parse_key
from .game_state import GameState
from .game import Game, GameStatus

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'Direction',
    'BOARD_SIZE', 'MOVE_INTERVAL', 'INITIAL_BODY', 'HIGH_SCORE_KEY',
    'Position',
    'Food',
    'Snake',
    'Action', 'parse_key',
    'GameState',
    'Game', 'GameStatus',
]
