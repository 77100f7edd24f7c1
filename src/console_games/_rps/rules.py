# Area: RPS
"""
console_games._rps.rules - Round evaluation
===========================================

Each move beats exactly two others and loses to the remaining two, so for
any pair exactly one of (a beats b), (b beats a), (a == b) holds.
"""

from typing import Dict, FrozenSet

from .enums import Move, Outcome

WINNING_PIECES: Dict[Move, FrozenSet[Move]] = {
    Move.ROCK: frozenset({Move.SCISSORS, Move.LIZARD}),
    Move.PAPER: frozenset({Move.ROCK, Move.SPOCK}),
    Move.SCISSORS: frozenset({Move.PAPER, Move.LIZARD}),
    Move.LIZARD: frozenset({Move.PAPER, Move.SPOCK}),
    Move.SPOCK: frozenset({Move.SCISSORS, Move.ROCK}),
}


def beats(a: Move, b: Move) -> bool:
    """True if move `a` defeats move `b`."""
    return b in WINNING_PIECES[a]


def evaluate(human: Move, computer: Move) -> Outcome:
    """Decide a single round between the human's and the computer's move."""
    if beats(human, computer):
        return Outcome.HUMAN_WIN
    if beats(computer, human):
        return Outcome.COMPUTER_WIN
    return Outcome.TIE
