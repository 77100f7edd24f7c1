# Area: Console
"""
console_games._console.twenty_one_app - Twenty-One screens
==========================================================
"""

import logging
from typing import List

from .._shared.participant import Participant, pick_computer
from .._shared.randomness import RandomSource
from .._twenty_one import COMPUTER_NAMES, Card, Outcome, Reason, RoundState, TwentyOneRound, total
from ..errors import InvalidStateError
from .console import Console
from .prompts import ask_choice, ask_name, ask_yes_no

logger = logging.getLogger("console_games.twenty_one")


def show_cards(console: Console, name: str, cards: List[Card]) -> None:
    console.say(f"----{name}'s Cards----")
    for card in cards:
        console.say(f"=> {card}")


def show_total(console: Console, name: str, cards: List[Card]) -> None:
    console.say(f"{name}'s total is: {total(cards)}.")


def show_hand(console: Console, name: str, cards: List[Card]) -> None:
    show_cards(console, name, cards)
    show_total(console, name, cards)
    console.say()


def show_first_card(console: Console, hand: TwentyOneRound) -> None:
    console.say(f"----{hand.dealer}'s card----")
    console.say(f"=> {hand.dealer_hand[0]}.")


def player_turn(console: Console, hand: TwentyOneRound) -> None:
    console.say(f"{hand.player}'s turn.")
    while hand.state == RoundState.PLAYER_TURN:
        hit = ask_choice(
            console,
            "Would you like to (h)it or (s)tay?",
            {"h": True, "s": False},
            "Sorry, must enter 'h' or 's'.",
        )
        console.clear()
        if not hit:
            console.say(f"{hand.player} stays!")
            hand.stay()
            break
        console.say(f"{hand.player} hits!")
        hand.hit()
        console.say()
        show_hand(console, hand.player.name, hand.player_hand)
        if hand.state == RoundState.PLAYER_TURN:
            show_first_card(console, hand)
            console.say()
        elif hand.state == RoundState.DEALER_TURN:
            console.say(f"{hand.player} you have blackjack!")


def dealer_turn(console: Console, hand: TwentyOneRound) -> None:
    console.clear()
    console.say(f"{hand.dealer}'s turn.")
    console.pause()
    for _ in hand.play_dealer():
        console.say(f"{hand.dealer} hits!")
        console.pause()
    console.clear()


def show_result(console: Console, hand: TwentyOneRound) -> None:
    if not hand.is_resolved:
        raise InvalidStateError(
            game="twenty_one",
            operation="show_result",
            state=hand.state.value,
            detail="hand has not been resolved",
        )
    resolution = hand.resolution
    player, dealer = hand.player, hand.dealer

    if resolution.reason != Reason.PLAYER_BUST:
        show_hand(console, player.name, hand.player_hand)
        show_hand(console, dealer.name, hand.dealer_hand)

    if resolution.reason == Reason.PLAYER_BUST:
        console.say(f"{player} is busted! {dealer} wins!")
    elif resolution.reason == Reason.DEALER_BUST:
        console.say(f"{dealer} is busted! {player} wins!")
    elif resolution.reason == Reason.DEALER_BLACKJACK:
        console.say(f"{dealer} has blackjack! {dealer} won!")
    elif resolution.outcome == Outcome.DEALER_WIN:
        console.say(f"{dealer} won!")
    elif resolution.outcome == Outcome.PLAYER_WIN:
        console.say(f"{player} won!")
    else:
        console.say("It's a tie!")


def play_hand(console: Console, player: Participant, rng: RandomSource) -> TwentyOneRound:
    hand = TwentyOneRound(player, pick_computer(COMPUTER_NAMES, rng), rng=rng)
    logger.info(f"New hand: {player} vs {hand.dealer}")
    console.say(f"Your challenger is {hand.dealer}.")
    console.say()
    console.say("Please hit enter to start dealing the cards.")
    console.ask()
    console.clear()
    console.say("Dealing cards to players...")
    console.pause(2)
    console.clear()

    hand.deal()
    show_hand(console, player.name, hand.player_hand)
    show_first_card(console, hand)
    console.say(".......?")
    console.say()

    if hand.state == RoundState.PLAYER_TURN:
        player_turn(console, hand)
    else:
        console.say(f"{player} you have blackjack!")

    if hand.state == RoundState.DEALER_TURN:
        dealer_turn(console, hand)

    show_result(console, hand)
    return hand


def play_twenty_one(console: Console, rng: RandomSource) -> None:
    """Deal hands until the player declines a rematch."""
    console.clear()
    player = Participant(ask_name(console, "Please enter your name:"))
    console.clear()
    console.say("***Welcome to Twenty-One Game.***")
    console.say()

    while True:
        play_hand(console, player, rng)
        if not ask_yes_no(console, "\nWould you like to play again? (y or n)"):
            break
        console.clear()

    console.say()
    console.say("Thank you for playing Twenty-One Game.")
    console.pause(2)
    console.clear()
