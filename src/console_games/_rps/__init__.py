# Area: RPS
"""
Rock-Paper-Scissors-Lizard-Spock core.

This package handles:
- Move evaluation (rules)
- Computer personalities (weighted move tables)
- Match state: scores, round counter, history
"""

from .enums import Move, MOVE_KEYS, Outcome, RPSState, RPSEvent
from .rules import beats, evaluate, WINNING_PIECES
from .personalities import (
    Personality,
    PERSONALITIES,
    COMPUTER_NAMES,
    choose,
    personality_for,
)
from .match import RPSMatch, RoundResult, TARGET_SCORE

__all__ = [
    "Move",
    "MOVE_KEYS",
    "Outcome",
    "RPSState",
    "RPSEvent",
    "beats",
    "evaluate",
    "WINNING_PIECES",
    "Personality",
    "PERSONALITIES",
    "COMPUTER_NAMES",
    "choose",
    "personality_for",
    "RPSMatch",
    "RoundResult",
    "TARGET_SCORE",
]
