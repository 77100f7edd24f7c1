# Area: TTT
"""
console_games._ttt.enums - Tic-Tac-Toe match states and events
==============================================================
"""

from enum import Enum


class TTTState(Enum):
    """
    States of the Tic-Tac-Toe match.

    State transitions:
    ROUND_COMPLETE -> AWAITING_MOVE (on ROUND_STARTED)
    AWAITING_MOVE -> AWAITING_MOVE (on MOVE_MADE)
    AWAITING_MOVE -> ROUND_COMPLETE (on ROUND_ENDED)
    AWAITING_MOVE -> MATCH_COMPLETE (on MATCH_WON)

    A fresh match sits in ROUND_COMPLETE until the first round starts.
    """
    AWAITING_MOVE = "AWAITING_MOVE"
    ROUND_COMPLETE = "ROUND_COMPLETE"
    MATCH_COMPLETE = "MATCH_COMPLETE"


class TTTEvent(Enum):
    ROUND_STARTED = "ROUND_STARTED"
    MOVE_MADE = "MOVE_MADE"
    ROUND_ENDED = "ROUND_ENDED"
    MATCH_WON = "MATCH_WON"
