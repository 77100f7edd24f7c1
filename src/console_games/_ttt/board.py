# Area: TTT
"""
console_games._ttt.board - Board, markers and win detection
===========================================================

Cells are numbered 1-9, left to right and top to bottom:

     1 | 2 | 3
    ---+---+---
     4 | 5 | 6
    ---+---+---
     7 | 8 | 9
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..errors import InvalidStateError

CELLS = tuple(range(1, 10))
CENTER = 5

WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (1, 2, 3), (4, 5, 6), (7, 8, 9),
    (1, 4, 7), (2, 5, 8), (3, 6, 9),
    (1, 5, 9), (3, 5, 7),
)


class Marker(Enum):
    X = "X"
    O = "O"

    @property
    def other(self) -> "Marker":
        return Marker.O if self is Marker.X else Marker.X

    def __str__(self) -> str:
        return self.value


class Board:
    """Nine cells, each empty (None) or holding a Marker."""

    def __init__(self) -> None:
        self._squares: Dict[int, Optional[Marker]] = {}
        self.reset()

    def reset(self) -> None:
        self._squares = {key: None for key in CELLS}

    def __getitem__(self, index: int) -> Optional[Marker]:
        return self._squares[index]

    def __setitem__(self, index: int, marker: Marker) -> None:
        if index not in self._squares:
            raise InvalidStateError("ttt", "place", "AWAITING_MOVE", f"cell {index} is off the board")
        if self._squares[index] is not None:
            raise InvalidStateError("ttt", "place", "AWAITING_MOVE", f"cell {index} is already taken")
        self._squares[index] = marker

    def unmarked_keys(self) -> List[int]:
        return [key for key in CELLS if self._squares[key] is None]

    def markers(self, line: Tuple[int, ...]) -> List[Optional[Marker]]:
        return [self._squares[key] for key in line]

    def cells(self) -> Dict[int, str]:
        """Cell index to display character (" " when empty)."""
        return {key: (m.value if m else " ") for key, m in self._squares.items()}


def is_won(board: Board, marker: Marker) -> bool:
    """True iff `marker` holds all three cells of any winning line."""
    return any(
        all(m == marker for m in board.markers(line))
        for line in WINNING_LINES
    )


def is_full(board: Board) -> bool:
    return not board.unmarked_keys()
