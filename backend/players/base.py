"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    Each player is responsible for returning the key to press given the
    current game state.
    """

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return a key for Game.handle_key_press, given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            A key string such as "ArrowUp", or None to keep the current heading.
        """
        raise NotImplementedError
