"""
Keyboard input mapping.

Keys arrive as the strings a browser or terminal reports ("ArrowUp", "w",
" ", ...). Matching is case-insensitive.
"""

from enum import Enum
from typing import Dict, Optional

from .constants import Direction


class Action(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"

    @property
    def direction(self) -> Optional[Direction]:
        """The movement direction for UP/DOWN/LEFT/RIGHT, None otherwise."""
        return _ACTION_DIRECTIONS.get(self)


_ACTION_DIRECTIONS = {
    Action.UP: Direction.UP,
    Action.DOWN: Direction.DOWN,
    Action.LEFT: Direction.LEFT,
    Action.RIGHT: Direction.RIGHT,
}

KEY_BINDINGS: Dict[str, Action] = {
    "arrowup": Action.UP,
    "w": Action.UP,
    "arrowdown": Action.DOWN,
    "s": Action.DOWN,
    "arrowleft": Action.LEFT,
    "a": Action.LEFT,
    "arrowright": Action.RIGHT,
    "d": Action.RIGHT,
    " ": Action.TOGGLE_PAUSE,
    "space": Action.TOGGLE_PAUSE,
    "r": Action.RESTART,
}

# Preferred key for each movement direction, used by players
DIRECTION_KEYS: Dict[Direction, str] = {
    Direction.UP: "ArrowUp",
    Direction.DOWN: "ArrowDown",
    Direction.LEFT: "ArrowLeft",
    Direction.RIGHT: "ArrowRight",
}


def parse_key(key) -> Optional[Action]:
    """Return the Action bound to `key`, or None for anything unrecognised."""
    if not isinstance(key, str) or not key:
        return None
    return KEY_BINDINGS.get(key.lower())
