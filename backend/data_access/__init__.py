"""
Data access layer for the snake game.

Provides the key/value stores the game uses to persist its high score.
"""

from .high_score_store import (
    HighScoreStore,
    InMemoryHighScoreStore,
    SqliteHighScoreStore,
)

__all__ = [
    'HighScoreStore',
    'InMemoryHighScoreStore',
    'SqliteHighScoreStore',
]
