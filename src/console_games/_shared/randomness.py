# Area: Shared
"""
console_games._shared.randomness - Injectable random source
===========================================================

Every random decision in the cores (opponent moves, card draws, computer
names) goes through a RandomSource so a seeded or scripted source makes
rounds reproducible.
"""

from __future__ import annotations
import random
from typing import Any, List, MutableSequence, Optional, Protocol, Sequence, Tuple, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """The subset of random.Random the games rely on."""

    def choice(self, seq: Sequence[Any]) -> Any: ...

    def choices(
        self,
        population: Sequence[Any],
        weights: Optional[Sequence[float]] = None,
        *,
        cum_weights: Optional[Sequence[float]] = None,
        k: int = 1,
    ) -> List[Any]: ...

    def shuffle(self, x: MutableSequence[Any]) -> None: ...


def make_random(seed: Optional[int] = None) -> random.Random:
    """Build the default random source, seeded when a seed is given."""
    return random.Random(seed)


def weighted_choice(rng: RandomSource, table: Sequence[Tuple[T, int]]) -> T:
    """Pick one value from a list of (value, weight) pairs."""
    values = [value for value, _ in table]
    weights = [weight for _, weight in table]
    return rng.choices(values, weights=weights, k=1)[0]
