# Area: Twenty-One
"""
Twenty-One (Blackjack) core.

This package handles:
- Cards and the always-full deck
- Hand totals with ace demotion
- The dealer's hit-below-17 policy
- One hand from deal to resolution
"""

from .cards import Card, Deck, SUITS, FACES
from .hand import BLACKJACK, total, is_bust, is_blackjack
from .dealer import DEALER_STAY_AT, COMPUTER_NAMES, should_hit, play_dealer
from .enums import RoundState, RoundEvent, Outcome, Reason
from .round import TwentyOneRound, Resolution, resolve

__all__ = [
    "Card",
    "Deck",
    "SUITS",
    "FACES",
    "BLACKJACK",
    "total",
    "is_bust",
    "is_blackjack",
    "DEALER_STAY_AT",
    "COMPUTER_NAMES",
    "should_hit",
    "play_dealer",
    "RoundState",
    "RoundEvent",
    "Outcome",
    "Reason",
    "TwentyOneRound",
    "Resolution",
    "resolve",
]
