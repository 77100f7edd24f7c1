# Area: TTT
"""
console_games._ttt.match - Tic-Tac-Toe match state
==================================================

A match is a series of rounds; the first side to win TARGET_SCORE rounds
takes it. Markers are fixed when the match is created: the human picks X
or O and the computer plays the complement. Who moves first is chosen at
the start of every round.
"""

from __future__ import annotations
import logging
from typing import Optional

from .._shared.participant import Participant
from .._shared.randomness import RandomSource, make_random
from .._shared.state_machine import StateMachine
from ..types import TTTMatchView
from .board import Board, Marker, is_full, is_won
from .enums import TTTEvent, TTTState
from .strategy import choose_move

logger = logging.getLogger("console_games.ttt")

TARGET_SCORE = 5

TRANSITIONS = {
    TTTState.ROUND_COMPLETE: {
        TTTEvent.ROUND_STARTED: TTTState.AWAITING_MOVE,
    },
    TTTState.AWAITING_MOVE: {
        TTTEvent.MOVE_MADE: TTTState.AWAITING_MOVE,
        TTTEvent.ROUND_ENDED: TTTState.ROUND_COMPLETE,
        TTTEvent.MATCH_WON: TTTState.MATCH_COMPLETE,
    },
    TTTState.MATCH_COMPLETE: {},
}


class TicTacToeMatch:
    """
    Tic-Tac-Toe match between the human and a computer opponent.

    Attributes:
        computer: Opponent seat
        board: The board of the round in progress
        human_score: Rounds won by the human
        computer_score: Rounds won by the computer
        current_marker: Marker whose turn it is
        round_winner: "human", "computer" or "tie" after a round ends
    """

    def __init__(
        self,
        computer: Participant,
        human_marker: Marker = Marker.X,
        rng: Optional[RandomSource] = None,
    ):
        self.computer = computer
        self._human_marker = human_marker
        self._computer_marker = human_marker.other
        self.rng = rng if rng is not None else make_random()
        self.board = Board()
        self.human_score = 0
        self.computer_score = 0
        self.current_marker = human_marker
        self.round_winner: Optional[str] = None
        self._machine = StateMachine("ttt", TRANSITIONS, TTTState.ROUND_COMPLETE)

    @property
    def human_marker(self) -> Marker:
        return self._human_marker

    @property
    def computer_marker(self) -> Marker:
        return self._computer_marker

    @property
    def state(self) -> TTTState:
        return self._machine.current_state

    @property
    def is_complete(self) -> bool:
        return self.state == TTTState.MATCH_COMPLETE

    @property
    def is_human_turn(self) -> bool:
        return self.current_marker == self._human_marker

    @property
    def winner(self) -> Optional[str]:
        if not self.is_complete:
            return None
        return "human" if self.human_score == TARGET_SCORE else "computer"

    def start_round(self, first_mover: Marker) -> None:
        """
        Clear the board and hand the first move to `first_mover`.

        Raises:
            InvalidStateError: If a round is in progress or the match is over
        """
        self._machine.transition(TTTEvent.ROUND_STARTED)
        self.board.reset()
        self.current_marker = first_mover
        self.round_winner = None
        logger.debug(f"New round, {first_mover} moves first")

    def place(self, cell: int) -> Optional[str]:
        """
        Place the current marker on `cell` and pass the turn.

        Returns:
            The round winner ("human", "computer" or "tie") if this move
            ended the round, else None

        Raises:
            InvalidStateError: If no round is in progress or the cell is
                unavailable
        """
        self._machine.require("place", TTTState.AWAITING_MOVE)
        mover = self.current_marker
        self.board[cell] = mover
        logger.debug(f"{mover} takes cell {cell}")

        # The turn passes even on the move that ends the round.
        self.current_marker = mover.other

        result = self._round_result()
        if result is None:
            self._machine.transition(TTTEvent.MOVE_MADE)
            return None

        self.round_winner = result
        if result == "human":
            self.human_score += 1
        elif result == "computer":
            self.computer_score += 1
        logger.info(f"Round over: {result} ({self.human_score}-{self.computer_score})")

        if TARGET_SCORE in (self.human_score, self.computer_score):
            self._machine.transition(TTTEvent.MATCH_WON)
            logger.info(f"Match complete, winner: {self.winner}")
        else:
            self._machine.transition(TTTEvent.ROUND_ENDED)
        return result

    def computer_move(self) -> int:
        """Let the computer pick a cell and place its marker there."""
        self._machine.require("computer_move", TTTState.AWAITING_MOVE)
        cell = choose_move(self.board, self._computer_marker, self._human_marker, self.rng)
        self.place(cell)
        return cell

    def _round_result(self) -> Optional[str]:
        if is_won(self.board, self._human_marker):
            return "human"
        if is_won(self.board, self._computer_marker):
            return "computer"
        if is_full(self.board):
            return "tie"
        return None

    def snapshot(self) -> TTTMatchView:
        return {
            "cells": self.board.cells(),
            "human_marker": self._human_marker.value,
            "computer_marker": self._computer_marker.value,
            "current_marker": self.current_marker.value,
            "human_score": self.human_score,
            "computer_score": self.computer_score,
            "state": self.state.value,
            "round_winner": self.round_winner,
        }
