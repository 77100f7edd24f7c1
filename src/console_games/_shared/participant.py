# Area: Shared
"""
console_games._shared.participant - Participant records
=======================================================

A participant is a plain record. Behaviour (which move to make) lives in
each game's strategy functions, not in a Human/Computer class hierarchy.
"""

from dataclasses import dataclass
from typing import Sequence

from .randomness import RandomSource


@dataclass(frozen=True)
class Participant:
    """
    A player seat in a match.

    Attributes:
        name: Display name (already validated by the front end for humans)
        is_computer: True for the scripted opponent
    """

    name: str
    is_computer: bool = False

    def __str__(self) -> str:
        return self.name


def pick_computer(pool: Sequence[str], rng: RandomSource) -> Participant:
    """Draw a computer opponent from a fixed name pool."""
    return Participant(name=rng.choice(list(pool)), is_computer=True)
