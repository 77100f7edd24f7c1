# Area: Console
"""
console_games._console.rps_app - Rock-Paper-Scissors-Lizard-Spock screens
=========================================================================
"""

import logging

from .._rps import COMPUTER_NAMES, MOVE_KEYS, Outcome, RPSMatch, TARGET_SCORE
from .._shared.participant import pick_computer
from .._shared.randomness import RandomSource
from ..types import RPSMatchView
from .console import Console
from .prompts import ask_choice, ask_name, ask_yes_no

logger = logging.getLogger("console_games.rps")

MOVE_PROMPT = (
    "Please choose (r, p, s, l or k) for (rock, paper, scissors, lizard or spock)\n"
    "press (ctrl + c) to quit the game."
)


def show_score(console: Console, human: str, view: RPSMatchView) -> None:
    console.say()
    console.say(f"{' ' * len(human)}      SCORE")
    console.say(f"{human}: {view['human_score']}    ||    {view['computer_name']}: {view['computer_score']}")
    console.say()


def show_history(console: Console, human: str, view: RPSMatchView) -> None:
    computer = view["computer_name"]
    console.say()
    console.say(f"{'Round':<7}{human:<14}{computer:<14}Winner")
    console.say("-" * (35 + len(human) + len(computer)))
    for entry in view["history"]:
        if entry["outcome"] == Outcome.HUMAN_WIN.value:
            winner = human
        elif entry["outcome"] == Outcome.COMPUTER_WIN.value:
            winner = computer
        else:
            winner = "Draw"
        console.say(
            f"{entry['round_number']:<7}{entry['human_move']:<14}{entry['computer_move']:<14}{winner}"
        )


def play_match(console: Console, human: str, rng: RandomSource) -> RPSMatch:
    match = RPSMatch(computer=pick_computer(COMPUTER_NAMES, rng), rng=rng)
    logger.info(f"New RPS match: {human} vs {match.computer}")
    console.say(f"{match.computer} is your challenger.")

    while not match.is_complete:
        show_score(console, human, match.snapshot())
        move = ask_choice(console, MOVE_PROMPT, MOVE_KEYS, "Sorry, invalid choice.")
        result = match.play_round(move)
        console.clear()
        console.say(f"{human} chose {result.human_move}.")
        console.say(f"{match.computer} chose {result.computer_move}.")
        if result.outcome == Outcome.HUMAN_WIN:
            console.say(f"{human} won!")
        elif result.outcome == Outcome.COMPUTER_WIN:
            console.say(f"{match.computer} won!")
        else:
            console.say("It's a tie!")
        show_history(console, human, match.snapshot())

    show_score(console, human, match.snapshot())
    grand_master = human if match.winner == "human" else match.computer.name
    console.say(f"{grand_master} is our Grand Master.")
    return match


def play_rps(console: Console, rng: RandomSource) -> None:
    """Run RPS matches until the player declines a rematch."""
    console.clear()
    human = ask_name(console)
    console.clear()
    console.say("Welcome to Rock, Paper, Scissors, Lizard and Spock Game!")
    console.say(f"Player winning first {TARGET_SCORE} games will be our Grand Winner.")

    while True:
        play_match(console, human, rng)
        if not ask_yes_no(console):
            break
        console.clear()

    console.say("Thanks for playing Rock, Paper, Scissors, Lizard and Spock. Good bye!")
    console.pause(2)
    console.clear()
