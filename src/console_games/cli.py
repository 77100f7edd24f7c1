# Area: Shared
"""
console_games.cli - Command-line interface
==========================================

Provides the CLI entry point for playing one of the games.

Usage:
    console-games rps                      # Rock-Paper-Scissors-Lizard-Spock
    console-games ttt                      # Tic-Tac-Toe
    console-games twenty-one               # Twenty-One
    console-games rps --seed 7 --no-pause  # Reproducible, no delays

Settings can also come from a JSON file (--config) or CONSOLE_GAMES_*
environment variables, see config.py.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ._console import GAMES, Console
from ._shared.logging_config import (
    disable_play_mode,
    enable_play_mode,
    log_game_error,
    setup_logging,
)
from ._shared.randomness import make_random
from .config import load_config
from .errors import ConfigError, ConsoleGamesError

logger = logging.getLogger("console_games")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="console-games",
        description="Play Rock-Paper-Scissors-Lizard-Spock, Tic-Tac-Toe or Twenty-One against the computer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  console-games rps
  console-games ttt --config config.json
  CONSOLE_GAMES_SEED=42 console-games twenty-one
        """,
    )

    parser.add_argument(
        "game",
        choices=sorted(GAMES),
        help="Which game to play",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random source for a reproducible session",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Path of the JSON log file",
    )

    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="Skip the pauses between screens",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    overrides = {
        "seed": args.seed,
        "log_file_path": args.log_file,
        "pause_seconds": 0 if args.no_pause else None,
    }
    try:
        config = load_config(args.config, overrides)
    except ConfigError as e:
        # Logging is not set up yet; print the block only.
        print(e.format_error_log(), file=sys.stderr)
        return 1

    setup_logging(config.log_file_path, config.level)
    logger.info(f"Starting {args.game} (seed={config.seed})")

    if console is None:
        console = Console(
            clear_enabled=config.clear_screen,
            pause_seconds=config.pause_seconds,
        )
    rng = make_random(config.seed)

    enable_play_mode()
    try:
        GAMES[args.game](console, rng)
    except ConsoleGamesError as e:
        log_game_error(e)
        return 1
    except (KeyboardInterrupt, EOFError):
        logger.info("Game interrupted by player")
        return 130
    finally:
        disable_play_mode()

    logger.info(f"Finished {args.game}")
    return 0
