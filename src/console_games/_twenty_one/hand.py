# Area: Twenty-One
"""
console_games._twenty_one.hand - Hand totals
============================================

J, Q and K count 10, number cards their face value and every ace starts
at 11. While the total is over 21, one ace at a time drops to 1 (the
total goes down by exactly 10); demotion stops as soon as the total is
21 or less, or when no aces are left.
"""

from typing import Sequence

from .cards import Card

BLACKJACK = 21
ACE_DEMOTION = 10


def card_value(card: Card) -> int:
    if card.face in ("J", "Q", "K"):
        return 10
    if card.face == "A":
        return 11
    return int(card.face)


def total(hand: Sequence[Card]) -> int:
    value = sum(card_value(card) for card in hand)
    aces = sum(1 for card in hand if card.face == "A")
    for _ in range(aces):
        if value <= BLACKJACK:
            break
        value -= ACE_DEMOTION
    return value


def is_bust(hand: Sequence[Card]) -> bool:
    return total(hand) > BLACKJACK


def is_blackjack(hand: Sequence[Card]) -> bool:
    return total(hand) == BLACKJACK
