"""
console_games - Three terminal games against the computer
=========================================================

Rock-Paper-Scissors-Lizard-Spock, Tic-Tac-Toe and Twenty-One, each built
from a pure game core (rules, opponent strategy, match state) and a thin
console front end.

Play from the terminal:
    console-games rps
    console-games ttt
    console-games twenty-one

Drive a core directly:
    from console_games import RPSMatch, Move, Participant
    import random

    match = RPSMatch(Participant("Hal", is_computer=True), rng=random.Random(1))
    result = match.play_round(Move.ROCK)
    print(result.outcome, match.human_score, match.computer_score)

Every random decision goes through the `rng` argument, so a seeded
random.Random (or any object with choice/choices/shuffle) makes a session
reproducible.
"""

from ._rps import Move, Outcome as RPSOutcome, RPSMatch, RoundResult, evaluate
from ._ttt import Board, Marker, TicTacToeMatch, choose_move, is_full, is_won
from ._twenty_one import Card, Deck, Outcome as TwentyOneOutcome, TwentyOneRound, total, is_bust, is_blackjack
from ._shared.participant import Participant
from ._shared.randomness import RandomSource
from .config import GameConfig, load_config
from .errors import (
    ConsoleGamesError,
    InvalidStateError,
    ConfigError,
)
from .types import (
    RPSRoundView,
    RPSMatchView,
    TTTMatchView,
    CardView,
    TwentyOneView,
)

__all__ = [
    # Rock-Paper-Scissors-Lizard-Spock
    "Move",
    "RPSOutcome",
    "RPSMatch",
    "RoundResult",
    "evaluate",
    # Tic-Tac-Toe
    "Board",
    "Marker",
    "TicTacToeMatch",
    "choose_move",
    "is_full",
    "is_won",
    # Twenty-One
    "Card",
    "Deck",
    "TwentyOneOutcome",
    "TwentyOneRound",
    "total",
    "is_bust",
    "is_blackjack",
    # Shared
    "Participant",
    "RandomSource",
    "GameConfig",
    "load_config",
    # Errors
    "ConsoleGamesError",
    "InvalidStateError",
    "ConfigError",
    # Views
    "RPSRoundView",
    "RPSMatchView",
    "TTTMatchView",
    "CardView",
    "TwentyOneView",
]
__version__ = "1.0.0"
