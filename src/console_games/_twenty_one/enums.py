# Area: Twenty-One
"""
console_games._twenty_one.enums - Hand states, events and outcomes
==================================================================
"""

from enum import Enum


class RoundState(Enum):
    """
    States of one Twenty-One hand.

    State transitions:
    DEALING -> PLAYER_TURN (on DEALT)
    PLAYER_TURN -> PLAYER_TURN (on PLAYER_HIT)
    PLAYER_TURN -> DEALER_TURN (on PLAYER_DONE: stay or 21)
    PLAYER_TURN -> RESOLVED (on PLAYER_BUST)
    DEALER_TURN -> RESOLVED (on DEALER_DONE)
    """
    DEALING = "DEALING"
    PLAYER_TURN = "PLAYER_TURN"
    DEALER_TURN = "DEALER_TURN"
    RESOLVED = "RESOLVED"


class RoundEvent(Enum):
    DEALT = "DEALT"
    PLAYER_HIT = "PLAYER_HIT"
    PLAYER_DONE = "PLAYER_DONE"
    PLAYER_BUST = "PLAYER_BUST"
    DEALER_DONE = "DEALER_DONE"


class Outcome(Enum):
    PLAYER_WIN = "PLAYER_WIN"
    DEALER_WIN = "DEALER_WIN"
    TIE = "TIE"


class Reason(Enum):
    """Which resolution rule decided the hand, in the order they are checked."""
    PLAYER_BUST = "PLAYER_BUST"
    DEALER_BUST = "DEALER_BUST"
    DEALER_BLACKJACK = "DEALER_BLACKJACK"
    HIGHER_TOTAL = "HIGHER_TOTAL"
    EQUAL_TOTALS = "EQUAL_TOTALS"
