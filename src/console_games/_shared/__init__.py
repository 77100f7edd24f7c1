# Area: Shared
"""
Shared utilities used by all three games.

This package contains:
- Logging configuration
- The injectable random source
- The table-driven state machine
- Participant records and computer opponent selection
"""

from .logging_config import (
    setup_logging,
    log_game_error,
    enable_play_mode,
    disable_play_mode,
    is_play_mode_enabled,
)
from .participant import Participant, pick_computer
from .randomness import RandomSource, make_random, weighted_choice
from .state_machine import StateMachine

__all__ = [
    "setup_logging",
    "log_game_error",
    "enable_play_mode",
    "disable_play_mode",
    "is_play_mode_enabled",
    "Participant",
    "pick_computer",
    "RandomSource",
    "make_random",
    "weighted_choice",
    "StateMachine",
]
