# Area: Console
"""
console_games._console.ttt_app - Tic-Tac-Toe screens
====================================================
"""

import logging

from .._shared.participant import pick_computer
from .._shared.randomness import RandomSource
from .._ttt import COMPUTER_NAMES, Marker, TARGET_SCORE, TicTacToeMatch, TTTState
from ..types import TTTMatchView
from .console import Console
from .prompts import ask_cell, ask_choice, ask_name, ask_yes_no

logger = logging.getLogger("console_games.ttt")


def draw_board(console: Console, view: TTTMatchView) -> None:
    c = view["cells"]
    for row, (a, b, d) in enumerate(((1, 2, 3), (4, 5, 6), (7, 8, 9))):
        if row:
            console.say("-----+-----+-----")
        console.say("     |     |")
        console.say(f"  {c[a]}  |  {c[b]}  |  {c[d]}")
        console.say("     |     |")


def show_score(console: Console, human: str, computer: str, view: TTTMatchView) -> None:
    console.clear()
    console.say(f"{' ' * len(human)}    Score")
    console.say(f"{human}: {view['human_score']}  ||  {computer}: {view['computer_score']}")
    console.say()


def show_board(console: Console, human: str, computer: str, view: TTTMatchView) -> None:
    console.say(f"{human} you're a {view['human_marker']}. {computer} is a {view['computer_marker']}.")
    console.say()
    draw_board(console, view)
    console.say()


def play_round(console: Console, human: str, match: TicTacToeMatch) -> None:
    first = ask_choice(
        console,
        "Decide who moves first. ('c' for computer, 'p' for you)",
        {"p": match.human_marker, "c": match.computer_marker},
        "Must enter 'c' or 'p'.",
    )
    match.start_round(first)
    computer = match.computer.name

    while match.state == TTTState.AWAITING_MOVE:
        if match.is_human_turn:
            show_score(console, human, computer, match.snapshot())
            show_board(console, human, computer, match.snapshot())
            match.place(ask_cell(console, match.board.unmarked_keys()))
        else:
            match.computer_move()

    view = match.snapshot()
    show_score(console, human, computer, view)
    show_board(console, human, computer, view)
    if view["round_winner"] == "human":
        console.say(f"{human} won!")
    elif view["round_winner"] == "computer":
        console.say(f"{computer} won!")
    else:
        console.say("It's a tie!")


def play_match(console: Console, human: str, rng: RandomSource) -> TicTacToeMatch:
    marker = ask_choice(
        console,
        "Which marker would you like to use for this game? (X or O)",
        {"X": Marker.X, "O": Marker.O},
        "Must choose (X or O).",
        upper=True,
    )
    match = TicTacToeMatch(pick_computer(COMPUTER_NAMES, rng), human_marker=marker, rng=rng)
    logger.info(f"New TTT match: {human} ({marker}) vs {match.computer} ({match.computer_marker})")
    console.say()
    console.say(f"{match.computer} is your next challenger.")
    console.say()

    while True:
        play_round(console, human, match)
        if match.is_complete:
            break
        console.say("Please hit enter to start next round.")
        console.ask()

    if match.winner == "human":
        console.say(f"{human} you are our Grand Master!")
    else:
        console.say(f"{match.computer} is Grand Master!")
    return match


def play_tic_tac_toe(console: Console, rng: RandomSource) -> None:
    """Run Tic-Tac-Toe matches until the player declines a rematch."""
    console.clear()
    human = ask_name(console, "Please enter your name:")
    console.clear()
    console.say("***Welcome to TicTacToe Game***")
    console.say()
    console.say(f"Any player winning first {TARGET_SCORE} games is our Grand Winner.")
    console.say()

    while True:
        play_match(console, human, rng)
        if not ask_yes_no(console):
            break
        console.say("Let's play again!")
        console.say()

    console.say("Thanks for playing Tic Tac Toe! Goodbye!")
    console.pause(2)
    console.clear()
