# Area: Console
"""
Console front end for the three games.

Owns every prompt, retry loop and screen; calls into the game cores with
validated values only.
"""

from .console import Console
from .prompts import ask_name, ask_choice, ask_yes_no, ask_cell, joinor
from .rps_app import play_rps
from .ttt_app import play_tic_tac_toe
from .twenty_one_app import play_twenty_one

GAMES = {
    "rps": play_rps,
    "ttt": play_tic_tac_toe,
    "twenty-one": play_twenty_one,
}

__all__ = [
    "Console",
    "ask_name",
    "ask_choice",
    "ask_yes_no",
    "ask_cell",
    "joinor",
    "play_rps",
    "play_tic_tac_toe",
    "play_twenty_one",
    "GAMES",
]
