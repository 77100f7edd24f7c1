# Area: Twenty-One
"""
console_games._twenty_one.round - One hand of Twenty-One
========================================================

Drives a single hand from the deal to the result:

    deal()         two cards each, player first
    hit() / stay() player's turn; 21 ends the turn, over 21 ends the hand
    play_dealer()  dealer draws below 17, then the hand is resolved

Resolution order (first rule that applies decides):
    player bust       -> dealer wins
    dealer bust       -> player wins
    dealer blackjack  -> dealer wins
    higher total wins, equal totals tie
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .._shared.participant import Participant
from .._shared.randomness import RandomSource, make_random
from .._shared.state_machine import StateMachine
from ..types import TwentyOneView
from .cards import Card, Deck
from .dealer import play_dealer
from .enums import Outcome, Reason, RoundEvent, RoundState
from .hand import is_blackjack, is_bust, total

logger = logging.getLogger("console_games.twenty_one")

TRANSITIONS = {
    RoundState.DEALING: {
        RoundEvent.DEALT: RoundState.PLAYER_TURN,
    },
    RoundState.PLAYER_TURN: {
        RoundEvent.PLAYER_HIT: RoundState.PLAYER_TURN,
        RoundEvent.PLAYER_DONE: RoundState.DEALER_TURN,
        RoundEvent.PLAYER_BUST: RoundState.RESOLVED,
    },
    RoundState.DEALER_TURN: {
        RoundEvent.DEALER_DONE: RoundState.RESOLVED,
    },
    RoundState.RESOLVED: {},
}


@dataclass(frozen=True)
class Resolution:
    """
    Final result of a hand.

    Attributes:
        outcome: Who won
        reason: Resolution rule that decided the hand
        player_total: Player's final total
        dealer_total: Dealer's final total
    """

    outcome: Outcome
    reason: Reason
    player_total: int
    dealer_total: int


def resolve(player_hand: Sequence[Card], dealer_hand: Sequence[Card]) -> Resolution:
    """Decide a finished hand."""
    player_total = total(player_hand)
    dealer_total = total(dealer_hand)

    if is_bust(player_hand):
        return Resolution(Outcome.DEALER_WIN, Reason.PLAYER_BUST, player_total, dealer_total)
    if is_bust(dealer_hand):
        return Resolution(Outcome.PLAYER_WIN, Reason.DEALER_BUST, player_total, dealer_total)
    if is_blackjack(dealer_hand):
        return Resolution(Outcome.DEALER_WIN, Reason.DEALER_BLACKJACK, player_total, dealer_total)
    if dealer_total > player_total:
        return Resolution(Outcome.DEALER_WIN, Reason.HIGHER_TOTAL, player_total, dealer_total)
    if player_total > dealer_total:
        return Resolution(Outcome.PLAYER_WIN, Reason.HIGHER_TOTAL, player_total, dealer_total)
    return Resolution(Outcome.TIE, Reason.EQUAL_TOTALS, player_total, dealer_total)


class TwentyOneRound:
    """
    A single hand between the player and the dealer.

    Attributes:
        player: Human seat
        dealer: Dealer seat (name drawn from the dealer pool)
        deck: Full pack, reshuffled for every draw
        player_hand: Player's cards in deal order
        dealer_hand: Dealer's cards in deal order
        resolution: Set once the hand is RESOLVED
    """

    def __init__(
        self,
        player: Participant,
        dealer: Participant,
        rng: Optional[RandomSource] = None,
    ):
        self.player = player
        self.dealer = dealer
        self.deck = Deck(rng if rng is not None else make_random())
        self.player_hand: List[Card] = []
        self.dealer_hand: List[Card] = []
        self.resolution: Optional[Resolution] = None
        self._machine = StateMachine("twenty_one", TRANSITIONS, RoundState.DEALING)

    @property
    def state(self) -> RoundState:
        return self._machine.current_state

    @property
    def is_resolved(self) -> bool:
        return self.state == RoundState.RESOLVED

    @property
    def player_total(self) -> int:
        return total(self.player_hand)

    @property
    def dealer_total(self) -> int:
        return total(self.dealer_hand)

    @property
    def outcome(self) -> Optional[Outcome]:
        return self.resolution.outcome if self.resolution else None

    def deal(self) -> None:
        """Deal two cards to each participant and start the player's turn."""
        self._machine.require("deal", RoundState.DEALING)
        for _ in range(2):
            self.player_hand.append(self.deck.deal_one())
            self.dealer_hand.append(self.deck.deal_one())
        logger.debug(
            f"Dealt {self.player}: {self.player_total}, {self.dealer} shows {self.dealer_hand[0]}"
        )
        self._machine.transition(RoundEvent.DEALT)
        if is_blackjack(self.player_hand):
            logger.info(f"{self.player} is dealt blackjack")
            self._machine.transition(RoundEvent.PLAYER_DONE)

    def hit(self) -> Card:
        """
        Give the player one more card.

        Returns:
            The card drawn

        Raises:
            InvalidStateError: If it is not the player's turn
        """
        self._machine.require("hit", RoundState.PLAYER_TURN)
        card = self.deck.deal_one()
        self.player_hand.append(card)
        logger.debug(f"{self.player} hits: {card} (total {self.player_total})")

        if is_bust(self.player_hand):
            self._machine.transition(RoundEvent.PLAYER_BUST)
            self._resolve()
        elif is_blackjack(self.player_hand):
            self._machine.transition(RoundEvent.PLAYER_DONE)
        else:
            self._machine.transition(RoundEvent.PLAYER_HIT)
        return card

    def stay(self) -> None:
        self._machine.require("stay", RoundState.PLAYER_TURN)
        logger.debug(f"{self.player} stays at {self.player_total}")
        self._machine.transition(RoundEvent.PLAYER_DONE)

    def play_dealer(self) -> List[Card]:
        """
        Run the dealer's turn and resolve the hand.

        Returns:
            Cards the dealer drew, in order
        """
        self._machine.require("play_dealer", RoundState.DEALER_TURN)
        drawn = play_dealer(self.dealer_hand, self.deck.deal_one)
        self._machine.transition(RoundEvent.DEALER_DONE)
        self._resolve()
        return drawn

    def _resolve(self) -> None:
        self.resolution = resolve(self.player_hand, self.dealer_hand)
        logger.info(
            f"Hand resolved: {self.resolution.outcome.value} ({self.resolution.reason.value}, "
            f"{self.resolution.player_total} vs {self.resolution.dealer_total})"
        )

    def snapshot(self) -> TwentyOneView:
        return {
            "state": self.state.value,
            "player_cards": [c.to_view() for c in self.player_hand],
            "dealer_cards": [c.to_view() for c in self.dealer_hand],
            "player_total": self.player_total,
            "dealer_total": self.dealer_total,
            "outcome": self.outcome.value if self.outcome else None,
        }
