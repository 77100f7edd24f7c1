# Area: RPS
"""
console_games._rps.personalities - Computer opponent personalities
==================================================================

Each computer opponent is named after a personality. A personality is a
fixed weighted distribution over the five moves, written as an explicit
list of (move, weight) pairs. Weights are integers; the probability of a
move is its weight divided by the table total.

    R2D2     rock 1/2, spock 1/2
    Chappie  paper 9/20, rock 6/20, lizard 3/20, spock 2/20
    Hal      scissors 7/20, lizard 7/20, rock 4/20, spock 2/20
    Sonny    each move 1/5 (also the fallback for unknown names)
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, Tuple

from .._shared.randomness import RandomSource, weighted_choice
from .enums import Move


@dataclass(frozen=True)
class Personality:
    """
    A named move distribution.

    Attributes:
        name: Computer opponent name
        table: (move, weight) pairs; moves absent from the table are never played
    """

    name: str
    table: Tuple[Tuple[Move, int], ...]

    def probability(self, move: Move) -> Fraction:
        """Exact probability that this personality plays `move`."""
        total = sum(weight for _, weight in self.table)
        weight = sum(w for m, w in self.table if m == move)
        return Fraction(weight, total)


R2D2 = Personality("R2D2", (
    (Move.ROCK, 1),
    (Move.SPOCK, 1),
))

CHAPPIE = Personality("Chappie", (
    (Move.PAPER, 9),
    (Move.ROCK, 6),
    (Move.LIZARD, 3),
    (Move.SPOCK, 2),
))

HAL = Personality("Hal", (
    (Move.SCISSORS, 7),
    (Move.LIZARD, 7),
    (Move.ROCK, 4),
    (Move.SPOCK, 2),
))

SONNY = Personality("Sonny", tuple((move, 1) for move in Move))

PERSONALITIES: Dict[str, Personality] = {
    p.name: p for p in (R2D2, HAL, CHAPPIE, SONNY)
}

COMPUTER_NAMES = tuple(PERSONALITIES)


def personality_for(name: str) -> Personality:
    """Look up a personality by opponent name, defaulting to uniform play."""
    return PERSONALITIES.get(name, SONNY)


def choose(personality: Personality, rng: RandomSource) -> Move:
    """Draw the computer's move from the personality's distribution."""
    return weighted_choice(rng, personality.table)
