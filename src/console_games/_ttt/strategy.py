# Area: TTT
"""
console_games._ttt.strategy - Computer move selection
=====================================================

Priority order, first match wins:
1. Block: a line with two opponent markers and one empty cell.
2. Take the center if it is free.
3. Any empty cell, uniformly at random.

The computer never looks for its own winning square first.
"""

from typing import Optional, Tuple

from .._shared.randomness import RandomSource
from ..errors import InvalidStateError
from .board import Board, CENTER, Marker, WINNING_LINES


def find_at_risk_square(board: Board, line: Tuple[int, int, int], marker: Marker) -> Optional[int]:
    """Empty cell of `line` if `marker` already holds the other two, else None."""
    markers = board.markers(line)
    if markers.count(marker) == 2 and None in markers:
        return line[markers.index(None)]
    return None


def retrieve_at_risk_square(board: Board, marker: Marker) -> Optional[int]:
    """First at-risk square for `marker`, scanning lines in WINNING_LINES order."""
    for line in WINNING_LINES:
        square = find_at_risk_square(board, line, marker)
        if square is not None:
            return square
    return None


def choose_move(board: Board, own_marker: Marker, opp_marker: Marker, rng: RandomSource) -> int:
    """
    Pick the computer's cell.

    Args:
        board: Current board (not modified)
        own_marker: The computer's marker
        opp_marker: The human's marker, checked for two-in-a-line threats
        rng: Random source for the fallback pick

    Returns:
        Cell index 1-9

    Raises:
        InvalidStateError: If the board has no empty cell
    """
    empty = board.unmarked_keys()
    if not empty:
        raise InvalidStateError("ttt", "choose_move", "ROUND_COMPLETE", "board is full")

    square = retrieve_at_risk_square(board, opp_marker)
    if square is not None:
        return square
    if CENTER in empty:
        return CENTER
    return rng.choice(empty)
