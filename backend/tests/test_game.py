"""
Tests for the Game orchestrator: ticks, scoring, pause/restart, input and
high-score persistence.
"""

import random
import pytest
import sys
import os
from unittest.mock import Mock

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from data_access import InMemoryHighScoreStore
from domain import (
    Game,
    GameStatus,
    Position,
    Snake,
    UP, DOWN, LEFT, RIGHT,
    HIGH_SCORE_KEY,
    INITIAL_BODY,
    MOVE_INTERVAL,
)


def place_food(game: Game, cell) -> None:
    """Put the food on a known cell."""
    game._food._position = Position(*cell)


def place_snake(game: Game, body, direction=RIGHT) -> None:
    game._snake = Snake(body, direction=direction)


@pytest.fixture
def game():
    g = Game(store=InMemoryHighScoreStore(), rng=random.Random(1234))
    # Keep the food away from the default path along row 12
    place_food(g, (0, 0))
    return g


class TestGameInitialization:
    """Tests for a freshly created game."""

    def test_initial_state(self, game):
        assert game.score == 0
        assert game.high_score == 0
        assert game.is_game_over is False
        assert game.is_paused is False
        assert game.status is GameStatus.RUNNING
        assert game.snake.body == tuple(Position(*c) for c in INITIAL_BODY)

    def test_move_interval(self, game):
        assert game.move_interval == MOVE_INTERVAL == 200

    def test_food_not_on_snake(self):
        for seed in range(20):
            g = Game(rng=random.Random(seed))
            assert g.food.position not in g.snake.body
            assert g.food.position.in_bounds()

    def test_high_score_loaded_from_store(self):
        store = InMemoryHighScoreStore({HIGH_SCORE_KEY: "17"})
        assert Game(store=store).high_score == 17

    def test_invalid_stored_high_score_reads_as_zero(self):
        store = InMemoryHighScoreStore({HIGH_SCORE_KEY: "lots"})
        assert Game(store=store).high_score == 0

    def test_failing_store_read_reads_as_zero(self):
        store = Mock()
        store.get.side_effect = RuntimeError("disk on fire")
        assert Game(store=store).high_score == 0

    def test_without_store(self):
        assert Game().high_score == 0


class TestGameUpdate:
    """Tests for Game.update()."""

    def test_update_moves_snake(self, game):
        game.update()
        assert game.snake.head == (13, 12)
        assert len(game.snake) == 4
        assert game.score == 0

    def test_eating_food(self, game):
        """Head at (12,12) moving right eats food at (13,12)."""
        place_food(game, (13, 12))
        game.update()

        body = game.snake.body
        assert game.score == 1
        assert len(body) == 5
        assert body[0] == (13, 12)
        assert game.food.position not in body
        assert game.food.position.in_bounds()

    def test_eating_food_raises_high_score_and_persists(self):
        store = InMemoryHighScoreStore()
        game = Game(store=store, rng=random.Random(7))
        place_food(game, (13, 12))
        game.update()

        assert game.high_score == 1
        assert store.get(HIGH_SCORE_KEY) == "1"

    def test_high_score_not_lowered_by_smaller_score(self):
        store = InMemoryHighScoreStore({HIGH_SCORE_KEY: "5"})
        game = Game(store=store, rng=random.Random(7))
        place_food(game, (13, 12))
        game.update()

        assert game.score == 1
        assert game.high_score == 5
        assert store.get(HIGH_SCORE_KEY) == "5"

    def test_failing_store_write_does_not_stop_game(self):
        store = Mock()
        store.get.return_value = None
        store.set.side_effect = RuntimeError("read-only")
        game = Game(store=store, rng=random.Random(7))
        place_food(game, (13, 12))

        game.update()

        assert game.score == 1
        assert game.high_score == 1
        store.set.assert_called_once_with(HIGH_SCORE_KEY, "1")

    def test_wall_collision_ends_game(self, game):
        place_snake(game, [(23, 12), (22, 12), (21, 12), (20, 12)])
        game.update()

        assert game.is_game_over is True
        assert game.status is GameStatus.GAME_OVER
        # The fatal move is kept
        assert game.snake.head == (24, 12)

    def test_update_after_game_over_is_noop(self, game):
        place_snake(game, [(23, 12), (22, 12), (21, 12), (20, 12)])
        game.update()
        body = game.snake.body

        for _ in range(5):
            game.update()

        assert game.snake.body == body
        assert game.is_game_over is True

    def test_self_collision_ends_game(self, game):
        place_snake(game, [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)], direction=RIGHT)
        game.handle_key_press("s")
        game.update()
        assert game.is_game_over is True

    def test_no_food_eaten_on_fatal_move(self, game):
        place_snake(game, [(23, 12), (22, 12), (21, 12), (20, 12)])
        place_food(game, (0, 0))
        game.update()
        assert game.score == 0
        assert len(game.snake) == 4

    def test_score_increments_per_food(self, game):
        for expected in range(1, 4):
            head = game.snake.head
            place_food(game, (head.x + 1, head.y))
            game.update()
            assert game.score == expected
        assert len(game.snake) == 7


class TestPause:
    """Tests for pausing."""

    def test_paused_update_changes_nothing(self, game):
        game.toggle_pause()
        assert game.status is GameStatus.PAUSED
        before = game.get_current_state()

        for _ in range(10):
            game.update()

        after = game.get_current_state()
        assert after.snake_body == before.snake_body
        assert after.food == before.food
        assert after.score == before.score

    def test_second_toggle_resumes(self, game):
        game.toggle_pause()
        game.update()
        game.toggle_pause()
        game.update()
        assert game.is_paused is False
        assert game.snake.head == (13, 12)

    def test_toggle_allowed_when_game_over(self, game):
        place_snake(game, [(23, 12)])
        game.update()
        game.toggle_pause()
        assert game.is_paused is True
        assert game.status is GameStatus.GAME_OVER


class TestRestart:
    """Tests for restart()."""

    def test_restart_resets_state(self, game):
        place_food(game, (13, 12))
        game.update()
        place_snake(game, [(23, 12)])
        game.update()
        game.toggle_pause()
        assert game.is_game_over

        game.restart()

        assert game.score == 0
        assert game.is_game_over is False
        assert game.is_paused is False
        assert game.status is GameStatus.RUNNING
        assert game.snake.body == tuple(Position(*c) for c in INITIAL_BODY)
        assert game.snake.direction is RIGHT
        assert game.food.position not in game.snake.body

    def test_restart_keeps_high_score(self, game):
        place_food(game, (13, 12))
        game.update()
        assert game.high_score == 1

        game.restart()

        assert game.high_score == 1

    def test_restart_while_running(self, game):
        game.update()
        game.update()
        game.restart()
        assert game.snake.head == (12, 12)


class TestKeyHandling:
    """Tests for handle_key_press()."""

    @pytest.mark.parametrize("key,direction", [
        ("ArrowUp", UP),
        ("w", UP),
        ("ArrowDown", DOWN),
        ("s", DOWN),
        ("W", UP),
        ("arrowdown", DOWN),
    ])
    def test_direction_keys(self, game, key, direction):
        game.handle_key_press(key)
        assert game.snake.direction is direction

    def test_reverse_key_ignored(self, game):
        game.handle_key_press("ArrowLeft")
        assert game.snake.direction is RIGHT
        game.handle_key_press("a")
        assert game.snake.direction is RIGHT

    def test_left_after_turning(self, game):
        game.handle_key_press("w")
        game.update()
        game.handle_key_press("a")
        assert game.snake.direction is LEFT

    def test_space_toggles_pause(self, game):
        game.handle_key_press(" ")
        assert game.is_paused is True
        game.handle_key_press(" ")
        assert game.is_paused is False

    def test_r_restarts(self, game):
        game.update()
        game.handle_key_press("R")
        assert game.snake.head == (12, 12)
        assert game.score == 0

    @pytest.mark.parametrize("key", ["x", "Enter", "", "ArrowUpp", None])
    def test_unknown_keys_ignored(self, game, key):
        before = game.get_current_state()
        game.handle_key_press(key)
        assert game.get_current_state() == before


class TestReadAccessors:
    """Accessors must not expose internal state for mutation."""

    def test_snake_is_a_copy(self, game):
        snake = game.snake
        snake.move()
        snake.grow()
        assert game.snake.body == tuple(Position(*c) for c in INITIAL_BODY)

    def test_food_is_a_copy(self, game):
        food = game.food
        food.relocate([(0, 0)])
        assert game.food.position == (0, 0)

    def test_food_copy_does_not_advance_game_rng(self):
        """Using the copied food must not change later placements."""
        touched = Game(rng=random.Random(5))
        untouched = Game(rng=random.Random(5))

        copied = touched.food
        for _ in range(10):
            copied.generate_position()
        copied.relocate(touched.snake.body)

        touched._food.relocate(touched.snake.body)
        untouched._food.relocate(untouched.snake.body)
        assert touched.food.position == untouched.food.position

    def test_current_state_snapshot(self, game):
        state = game.get_current_state()
        game.update()
        assert state.head == (12, 12)
        assert game.get_current_state().head == (13, 12)

    def test_current_state_fields(self, game):
        state = game.get_current_state()
        assert state.food == (0, 0)
        assert state.direction is RIGHT
        assert state.score == 0
        assert state.width == state.height == 24
