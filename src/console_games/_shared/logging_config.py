# Area: Shared
"""
console_games._shared.logging_config - Structured logging setup
===============================================================

Configures dual logging: terminal (colored) + file (JSON).
Provides structured error logging.
Play mode suppresses standard logs on the terminal while a game owns
the screen; the file log keeps everything.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..errors import ConsoleGamesError

# Package logger
logger = logging.getLogger("console_games")

# Flag to control terminal log output during play
_play_mode_enabled = False


class PlayModeFilter(logging.Filter):
    """Filter that suppresses terminal logs while play mode is enabled.

    In play mode the console front end prints the boards and prompts
    directly, so log lines would interleave with the game screen.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return not is_play_mode_enabled()


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    log_file_path: str = "console_games.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str
        Path to the log file. Defaults to 'console_games.log' in current dir.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("console_games")
    pkg_logger.setLevel(level)

    pkg_logger.handlers.clear()

    terminal_handler = logging.StreamHandler(sys.stdout)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(PlayModeFilter())
    pkg_logger.addHandler(terminal_handler)

    try:
        log_path = Path(log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(JSONFormatter())
        pkg_logger.addHandler(file_handler)
    except OSError as e:
        pkg_logger.warning(f"Could not create log file: {e}")

    pkg_logger.propagate = False


def log_game_error(error: "ConsoleGamesError") -> None:
    """
    Log a game error in the structured format.

    Parameters
    ----------
    error : ConsoleGamesError
        The error to log (InvalidStateError or ConfigError).
    """
    error_block = error.format_error_log()

    # Print to terminal (bypassing logger for exact formatting)
    print(error_block, file=sys.stderr)

    logger.error(
        f"Game error: {error.__class__.__name__}: {error}",
        extra={"error_type": error.__class__.__name__},
    )


def enable_play_mode() -> None:
    """Suppress terminal logging while a game is drawing to the screen."""
    global _play_mode_enabled
    _play_mode_enabled = True


def disable_play_mode() -> None:
    """Disable play mode (restore terminal logging)."""
    global _play_mode_enabled
    _play_mode_enabled = False


def is_play_mode_enabled() -> bool:
    """Check if play mode is enabled."""
    return _play_mode_enabled
