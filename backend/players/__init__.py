"""
Player implementations for the snake game.

A player looks at a GameState each tick and answers with a key press,
standing in for a human at the keyboard.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
