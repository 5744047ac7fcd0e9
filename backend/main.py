"""
Headless driver for the snake game.

Runs the tick loop the way a UI would: every `move_interval` milliseconds
the player is asked for a key, the key is forwarded to the game, and the
game advances one tick.
"""

import argparse
import json
import logging
import os
import random
import time
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from data_access import InMemoryHighScoreStore, SqliteHighScoreStore
from domain import Game
from players import Player, RandomPlayer

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# -------------------------------
# Simulation Function
# -------------------------------

def run_game(
    game: Game,
    player: Player,
    max_ticks: int,
    tick_delay: float = 0.0,
    show_board: bool = False,
) -> Dict[str, Any]:
    """
    Drive a game until it is over or `max_ticks` ticks have run.

    Args:
        game: the Game to drive
        player: supplies one key (or None) per tick
        max_ticks: upper limit on ticks
        tick_delay: seconds to sleep between ticks (0 runs flat out)
        show_board: log the board after every tick

    Returns:
        A dictionary summarizing the run.
    """
    ticks = 0
    while ticks < max_ticks and not game.is_game_over:
        key = player.get_move(game.get_current_state())
        if key is not None:
            game.handle_key_press(key)

        game.update()
        ticks += 1

        if show_board:
            logger.info("\n%s\n", game.get_current_state().print_board())

        if tick_delay > 0:
            time.sleep(tick_delay)

    state = game.get_current_state()
    return {
        "ticks": ticks,
        "score": state.score,
        "high_score": state.high_score,
        "length": len(state.snake_body),
        "game_over": state.is_game_over,
    }


# -------------------------------
# Main Entry Point
# -------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a headless snake game driven by a random autopilot."
    )
    parser.add_argument("--ticks", type=int, default=1000,
                        help="Maximum number of ticks to run")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the autopilot")
    parser.add_argument("--delay", type=float, default=0.0,
                        help="Seconds between ticks (use 0.2 for real-time speed)")
    parser.add_argument("--db", type=str, default=None,
                        help="SQLite file for the high score (default: SNAKE_DB_PATH or backend/snake.db)")
    parser.add_argument("--in-memory", action="store_true",
                        help="Do not persist the high score")
    parser.add_argument("--show-board", action="store_true",
                        help="Log the board after every tick")
    parser.add_argument("--log-level", type=str.upper, default=None, choices=LOG_LEVELS,
                        help="Logging level (default: SNAKE_LOG_LEVEL or INFO)")
    return parser


def main(argv: Optional[list] = None) -> Dict[str, Any]:
    load_dotenv()

    args = build_parser().parse_args(argv)

    env_level = os.getenv("SNAKE_LOG_LEVEL", "").strip().upper()
    level = args.log_level or (env_level if env_level in LOG_LEVELS else "INFO")
    logging.basicConfig(level=level, format="%(message)s")
    if env_level and env_level not in LOG_LEVELS:
        logger.warning("Ignoring unknown SNAKE_LOG_LEVEL %r, using %s", env_level, level)

    if args.in_memory:
        store = InMemoryHighScoreStore()
    else:
        store = SqliteHighScoreStore(args.db)

    game_rng = random.Random(args.seed)
    player_rng = random.Random(args.seed)

    game = Game(store=store, rng=game_rng)
    player = RandomPlayer(rng=player_rng)

    logger.info("Starting game (tick every %d ms, high score %d)", game.move_interval, game.high_score)

    result = run_game(
        game,
        player,
        max_ticks=args.ticks,
        tick_delay=args.delay,
        show_board=args.show_board,
    )

    logger.info("\n%s\n", game.get_current_state().print_board())
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
