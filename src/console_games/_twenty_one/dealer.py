# Area: Twenty-One
"""
console_games._twenty_one.dealer - Dealer policy
================================================

The dealer has no personality: it hits while its total is below 17 and
stays otherwise.
"""

import logging
from typing import Callable, List

from .cards import Card
from .hand import total

logger = logging.getLogger("console_games.twenty_one")

DEALER_STAY_AT = 17

COMPUTER_NAMES = ("R2D2", "ROBOT", "HAL", "ARNOLD", "RAMBO")


def should_hit(hand: List[Card]) -> bool:
    return total(hand) < DEALER_STAY_AT


def play_dealer(hand: List[Card], draw: Callable[[], Card]) -> List[Card]:
    """
    Draw into `hand` until the dealer must stay.

    Args:
        hand: Dealer's hand, extended in place
        draw: Returns the next card

    Returns:
        The cards drawn, in order (empty if the dealer stayed at once)
    """
    drawn: List[Card] = []
    while should_hit(hand):
        card = draw()
        hand.append(card)
        drawn.append(card)
        logger.debug(f"Dealer hits: {card} (total {total(hand)})")
    return drawn
