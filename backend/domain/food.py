"""
Food entity for the game engine.
"""

import copy
import logging
import random
from typing import Iterable, Optional

from .constants import BOARD_WIDTH, BOARD_HEIGHT, MAX_RELOCATE_ATTEMPTS
from .position import Position

logger = logging.getLogger(__name__)


class Food:
    """
    A single food item on the board.

    Attributes:
        position: the cell the food currently occupies
    """

    def __init__(self, occupied_cells: Iterable = (), rng: Optional[random.Random] = None):
        # Anything with randrange/choice works; defaults to the module-level generator
        self._rng = rng if rng is not None else random
        self._position = self.generate_position()
        self.relocate(occupied_cells)

    @property
    def position(self) -> Position:
        return self._position

    def get_position(self) -> Position:
        return self._position

    def generate_position(self) -> Position:
        """Return a uniformly random cell on the board. No occupancy check."""
        return Position(
            self._rng.randrange(BOARD_WIDTH),
            self._rng.randrange(BOARD_HEIGHT),
        )

    def relocate(self, occupied_cells: Iterable) -> None:
        """
        Move the food to a random cell that is not in `occupied_cells`.

        Samples blindly first; if that keeps hitting occupied cells the new
        position is picked from the free cells directly. When the board has
        no free cell the food stays where it is.
        """
        occupied = {Position(*cell) for cell in occupied_cells}

        for _ in range(MAX_RELOCATE_ATTEMPTS):
            candidate = self.generate_position()
            if candidate not in occupied:
                self._position = candidate
                return

        free_cells = [
            Position(x, y)
            for y in range(BOARD_HEIGHT)
            for x in range(BOARD_WIDTH)
            if Position(x, y) not in occupied
        ]
        if not free_cells:
            logger.warning("No free cell left for food; keeping it at %s", self._position)
            return

        self._position = self._rng.choice(free_cells)

    def __deepcopy__(self, memo):
        # The module-level generator cannot be deep-copied; snapshot its state instead
        if self._rng is random:
            rng = random.Random()
            rng.setstate(random.getstate())
        else:
            rng = copy.deepcopy(self._rng, memo)
        clone = Food.__new__(Food)
        clone._rng = rng
        clone._position = self._position
        return clone

    def __repr__(self):
        return f"<Food position={tuple(self._position)}>"
