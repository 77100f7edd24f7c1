# Area: RPS
"""
console_games._rps.enums - RPS moves, outcomes and match states
===============================================================

Defines the five moves, the round outcomes and the states/events of the
RPS match state machine.
"""

from enum import Enum


class Move(Enum):
    """The five RPS-Lizard-Spock moves."""
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"
    LIZARD = "lizard"
    SPOCK = "spock"

    def __str__(self) -> str:
        return self.value


# Single-letter keys the console accepts for each move
MOVE_KEYS = {
    "r": Move.ROCK,
    "p": Move.PAPER,
    "s": Move.SCISSORS,
    "l": Move.LIZARD,
    "k": Move.SPOCK,
}


class Outcome(Enum):
    """Result of one round from the human's point of view."""
    HUMAN_WIN = "HUMAN_WIN"
    COMPUTER_WIN = "COMPUTER_WIN"
    TIE = "TIE"


class RPSState(Enum):
    """
    States of the RPS match.

    State transitions:
    IN_PROGRESS -> IN_PROGRESS (on ROUND_PLAYED)
    IN_PROGRESS -> MATCH_COMPLETE (on TARGET_REACHED)
    """
    IN_PROGRESS = "IN_PROGRESS"
    MATCH_COMPLETE = "MATCH_COMPLETE"


class RPSEvent(Enum):
    ROUND_PLAYED = "ROUND_PLAYED"
    TARGET_REACHED = "TARGET_REACHED"
