# Area: TTT
"""
Tic-Tac-Toe core.

This package handles:
- The 3x3 board and win/full detection
- The computer's block-then-center-then-random strategy
- Match state: markers, turn order, round and match scores
"""

from .board import Board, Marker, WINNING_LINES, CENTER, is_won, is_full
from .enums import TTTState, TTTEvent
from .strategy import choose_move, retrieve_at_risk_square
from .match import TicTacToeMatch, TARGET_SCORE

COMPUTER_NAMES = ("Hal", "RDX", "Robo", "Boxer")

__all__ = [
    "Board",
    "Marker",
    "WINNING_LINES",
    "CENTER",
    "is_won",
    "is_full",
    "TTTState",
    "TTTEvent",
    "choose_move",
    "retrieve_at_risk_square",
    "TicTacToeMatch",
    "TARGET_SCORE",
    "COMPUTER_NAMES",
]
