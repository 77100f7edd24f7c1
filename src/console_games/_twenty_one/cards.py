# Area: Twenty-One
"""
console_games._twenty_one.cards - Cards and the deck
====================================================

A Deck always holds the full 52 suit/face combinations. Every draw
shuffles a copy of the full pack and takes its top card, so draws within
a hand are independent and the deck is never depleted.
"""

from dataclasses import dataclass
from itertools import product
from typing import List, Tuple

from .._shared.randomness import RandomSource
from ..types import CardView

SUITS: Tuple[str, ...] = ("Heart", "Diamond", "Spades", "Clubs")
FACES: Tuple[str, ...] = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")


@dataclass(frozen=True)
class Card:
    suit: str
    face: str

    def __str__(self) -> str:
        return f"{self.face} of {self.suit}"

    def to_view(self) -> CardView:
        return {"suit": self.suit, "face": self.face}


class Deck:
    """Full 52-card pack; rebuilt for every hand."""

    def __init__(self, rng: RandomSource):
        self.rng = rng
        self._cards: Tuple[Card, ...] = tuple(
            Card(suit, face) for suit, face in product(SUITS, FACES)
        )

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self._cards

    def deal_one(self) -> Card:
        """Shuffle a fresh copy of the pack and take the top card."""
        pack: List[Card] = list(self.cards)
        self.rng.shuffle(pack)
        return pack.pop()
