# Area: Console
"""
console_games._console.prompts - Re-prompting input loops
=========================================================

Raw input is validated here and re-asked until it is acceptable, so the
game cores only ever receive valid values.
"""

from typing import Iterable, List, Mapping, TypeVar

from .console import Console

T = TypeVar("T")


def ask_name(console: Console, question: str = "What's your name?") -> str:
    """Ask until a non-blank name is given; returns it stripped and capitalized."""
    while True:
        console.say(question)
        name = console.ask().strip()
        if name:
            return name.capitalize()
        console.say("Sorry, must enter a value.")


def ask_choice(
    console: Console,
    question: str,
    choices: Mapping[str, T],
    error: str,
    upper: bool = False,
) -> T:
    """Ask until the answer is one of the keys of `choices`; return its value."""
    while True:
        console.say(question)
        answer = console.ask().strip()
        answer = answer.upper() if upper else answer.lower()
        if answer in choices:
            return choices[answer]
        console.say(error)


def ask_yes_no(console: Console, question: str = "Would you like to play again? (y/n)") -> bool:
    return ask_choice(
        console,
        question,
        {"y": True, "n": False},
        "Sorry, must be y or n.",
    )


def ask_cell(console: Console, available: List[int]) -> int:
    """Ask for a free Tic-Tac-Toe cell number."""
    console.say(f"Choose a square between ({joinor(available)}): ")
    while True:
        answer = console.ask().strip()
        if answer.isdigit() and int(answer) in available:
            return int(answer)
        console.say("Sorry, that's not a valid choice.")


def joinor(items: Iterable[object], punctuation: str = ", ", word: str = "or") -> str:
    """Join items for a prompt: '1, 2, 3 or 4'."""
    parts = [str(item) for item in items]
    if not parts:
        return ""
    if len(parts) <= 2:
        return f" {word} ".join(parts)
    return f"{punctuation.join(parts[:-1])} {word} {parts[-1]}"
