"""
Game orchestration: ticks, scoring, pause/restart and input handling.
"""

import copy
import logging
import random
from enum import Enum
from typing import Optional

from .constants import BOARD_WIDTH, BOARD_HEIGHT, HIGH_SCORE_KEY, MOVE_INTERVAL
from .controls import Action, parse_key
from .food import Food
from .game_state import GameState
from .snake import Snake

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Game:
    """
    Manages:
      - One snake and one food item
      - Score and persisted high score
      - Pause / game-over status
      - Key handling

    An external driver calls update() every `move_interval` milliseconds and
    reads state back through the properties or get_current_state().

    `store` is any object with get(key) / set(key, value) over strings (see
    data_access.high_score_store); without one the high score lives only in
    memory. `rng` is passed to Food so placement can be seeded.
    """

    move_interval = MOVE_INTERVAL

    def __init__(self, store=None, rng: Optional[random.Random] = None):
        self._store = store
        self._rng = rng
        self._snake = Snake()
        self._food = Food(self._snake.body, rng=self._rng)
        self._score = 0
        self._high_score = self._load_high_score()
        self._is_game_over = False
        self._is_paused = False

    # Getters

    @property
    def snake(self) -> Snake:
        """A copy of the snake; changing it does not affect the game."""
        return copy.deepcopy(self._snake)

    @property
    def food(self) -> Food:
        """A copy of the food; changing it does not affect the game."""
        return copy.deepcopy(self._food)

    @property
    def score(self) -> int:
        return self._score

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def is_game_over(self) -> bool:
        return self._is_game_over

    @property
    def is_paused(self) -> bool:
        return self._is_paused

    @property
    def status(self) -> GameStatus:
        if self._is_game_over:
            return GameStatus.GAME_OVER
        if self._is_paused:
            return GameStatus.PAUSED
        return GameStatus.RUNNING

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            snake_body=self._snake.body,
            direction=self._snake.direction,
            food=self._food.position,
            score=self._score,
            high_score=self._high_score,
            is_game_over=self._is_game_over,
            is_paused=self._is_paused,
            width=BOARD_WIDTH,
            height=BOARD_HEIGHT,
        )

    # Game loop

    def update(self) -> None:
        """
        Execute one tick:
          1) Do nothing if the game is over or paused
          2) Move the snake
          3) End the game on a wall or self collision
          4) Grow, score and relocate the food if the head reached it
        """
        if self._is_game_over or self._is_paused:
            return

        self._snake.move()

        if self._snake.check_collision():
            self._game_over()
            return

        if self._snake.head == self._food.position:
            self._snake.grow()
            self._update_score()
            self._food.relocate(self._snake.body)

    def _update_score(self) -> None:
        self._score += 1
        logger.info("Score: %d", self._score)
        if self._score > self._high_score:
            self._high_score = self._score
            self._save_high_score()

    def _game_over(self) -> None:
        self._is_game_over = True
        logger.info(
            "Game over at %s with score %d (high score %d)",
            tuple(self._snake.head), self._score, self._high_score,
        )

    # Game controls

    def toggle_pause(self) -> None:
        self._is_paused = not self._is_paused

    def restart(self) -> None:
        self._snake = Snake()
        self._food = Food(self._snake.body, rng=self._rng)
        self._score = 0
        self._is_game_over = False
        self._is_paused = False

    def handle_key_press(self, key) -> None:
        action = parse_key(key)
        if action is None:
            logger.debug("Ignoring unrecognised key %r", key)
            return

        if action is Action.TOGGLE_PAUSE:
            self.toggle_pause()
        elif action is Action.RESTART:
            self.restart()
        else:
            self._snake.set_direction(action.direction)

    # High-score persistence

    def _load_high_score(self) -> int:
        if self._store is None:
            return 0
        try:
            raw = self._store.get(HIGH_SCORE_KEY)
        except Exception as e:
            logger.warning("Could not read high score: %s", e)
            return 0
        if raw is None:
            return 0
        try:
            return max(0, int(str(raw).strip()))
        except ValueError:
            logger.warning("Ignoring invalid stored high score %r", raw)
            return 0

    def _save_high_score(self) -> None:
        if self._store is None:
            return
        try:
            self._store.set(HIGH_SCORE_KEY, str(self._high_score))
        except Exception as e:
            # Don't raise - the game keeps running if persistence fails
            logger.warning("Could not save high score: %s", e)

    def __repr__(self):
        return (
            f"<Game status={self.status.value}, score={self._score}, "
            f"high_score={self._high_score}, snake={self._snake!r}>"
        )
