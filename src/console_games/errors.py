# Area: Shared
"""
console_games.errors - Custom exception classes
===============================================

Defines the exception hierarchy for the game cores.
Each exception stores full context for structured logging.

The cores never see raw user input, so the only failure they signal is a
broken precondition: the console front end asked for something the current
round state does not allow.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from .error_formatter import format_error_block


class ConsoleGamesError(Exception):
    """Base exception for all console_games errors."""
    pass


class InvalidStateError(ConsoleGamesError):
    """Raised when an operation is requested in a state that forbids it.

    Examples: placing a marker on an occupied square, hitting after the hand
    is resolved, playing a round of a match that is already decided.
    """

    def __init__(
        self,
        game: str,
        operation: str,
        state: str,
        detail: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.game = game
        self.operation = operation
        self.state = state
        self.detail = detail
        self.context = context or {}
        message = f"{game}: '{operation}' is not allowed in state {state}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="INVALID_STATE",
            game=self.game,
            operation=self.operation,
            state=self.state,
            context=self.context,
            details=[self.detail] if self.detail else None,
        )


class ConfigError(ConsoleGamesError):
    """Raised when the configuration file or environment is invalid."""

    def __init__(self, source: str, errors: List[str]):
        self.source = source
        self.errors = errors
        super().__init__(f"Invalid configuration from {source}: {errors}")

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="INVALID_CONFIG",
            game="-",
            operation="load_config",
            state=self.source,
            context=None,
            details=self.errors,
        )
