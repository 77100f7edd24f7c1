# Area: TTT Tests
"""Tests for the Tic-Tac-Toe match state machine."""

import random

import pytest
from console_games._shared.participant import Participant
from console_games._ttt.board import Marker
from console_games._ttt.enums import TTTState
from console_games._ttt.match import TARGET_SCORE, TicTacToeMatch
from console_games.errors import InvalidStateError

X, O = Marker.X, Marker.O

# Human X moves first and completes the top row on the fifth move.
HUMAN_WINS = [1, 4, 2, 5, 3]

# Full board without a winner: X O X / X O O / O X X
TIE = [1, 2, 3, 5, 4, 6, 8, 7, 9]


def make_match(human_marker=X, seed=0):
    return TicTacToeMatch(
        Participant("Robo", is_computer=True),
        human_marker=human_marker,
        rng=random.Random(seed),
    )


def play_cells(match, cells):
    result = None
    for cell in cells:
        result = match.place(cell)
    return result


class TestMarkers:
    """Tests for marker assignment."""

    def test_computer_takes_complement(self):
        """Test that the computer plays the other marker."""
        match = make_match(O)
        assert match.human_marker == O
        assert match.computer_marker == X

    def test_markers_always_distinct(self):
        """Test that the two markers differ for either choice."""
        for marker in Marker:
            match = make_match(marker)
            assert match.human_marker != match.computer_marker


class TestRoundFlow:
    """Tests for placing markers and turn alternation."""

    def test_place_before_round_raises(self):
        """Test that placing before start_round fails."""
        match = make_match()
        assert match.state == TTTState.ROUND_COMPLETE
        with pytest.raises(InvalidStateError):
            match.place(1)

    def test_first_mover_is_configurable(self):
        """Test that either marker can open a round."""
        match = make_match()
        match.start_round(O)
        assert match.current_marker == O
        assert match.is_human_turn is False

    def test_turn_alternates_after_each_move(self):
        """Test that the turn passes after every move."""
        match = make_match()
        match.start_round(X)
        match.place(1)
        assert match.current_marker == O
        match.place(5)
        assert match.current_marker == X

    def test_turn_alternates_on_round_ending_move(self):
        """Test that the turn passes even on the winning move."""
        match = make_match()
        match.start_round(X)
        result = play_cells(match, HUMAN_WINS)
        assert result == "human"
        assert match.current_marker == O

    def test_occupied_cell_keeps_turn(self):
        """Test that a refused move keeps the turn and the state."""
        match = make_match()
        match.start_round(X)
        match.place(1)
        with pytest.raises(InvalidStateError):
            match.place(1)
        assert match.current_marker == O
        assert match.state == TTTState.AWAITING_MOVE

    def test_win_scores_and_completes_round(self):
        """Test that a win scores and ends the round."""
        match = make_match()
        match.start_round(X)
        play_cells(match, HUMAN_WINS)
        assert match.state == TTTState.ROUND_COMPLETE
        assert match.human_score == 1
        assert match.computer_score == 0
        assert match.round_winner == "human"

    def test_computer_marker_win(self):
        """Test that a line of the computer's marker scores for the computer."""
        match = make_match(human_marker=O)
        match.start_round(X)
        assert play_cells(match, HUMAN_WINS) == "computer"
        assert match.computer_score == 1

    def test_full_board_is_tie(self):
        """Test that a full board without a line is a tie."""
        match = make_match()
        match.start_round(X)
        assert play_cells(match, TIE) == "tie"
        assert (match.human_score, match.computer_score) == (0, 0)
        assert match.state == TTTState.ROUND_COMPLETE

    def test_place_after_round_end_raises(self):
        """Test that the board is closed after a round ends."""
        match = make_match()
        match.start_round(X)
        play_cells(match, HUMAN_WINS)
        with pytest.raises(InvalidStateError):
            match.place(9)

    def test_start_round_mid_round_raises(self):
        """Test that a round cannot restart mid-play."""
        match = make_match()
        match.start_round(X)
        with pytest.raises(InvalidStateError):
            match.start_round(X)

    def test_new_round_clears_board(self):
        """Test that the next round starts on an empty board."""
        match = make_match()
        match.start_round(X)
        play_cells(match, HUMAN_WINS)
        match.start_round(O)
        assert len(match.board.unmarked_keys()) == 9
        assert match.round_winner is None


class TestComputerMove:
    """Tests for computer_move()."""

    def test_takes_center_then_blocks(self):
        """Human X plays 1 and 2; the computer answers 5 then blocks 3."""
        match = make_match()
        match.start_round(X)
        match.place(1)
        assert match.computer_move() == 5
        match.place(2)
        assert match.computer_move() == 3
        assert match.board[3] == O

    def test_computer_move_outside_round_raises(self):
        """Test that the computer cannot move between rounds."""
        with pytest.raises(InvalidStateError):
            make_match().computer_move()


class TestMatchCompletion:
    """Tests for the first-to-5 terminal condition."""

    def test_first_to_five(self):
        """Test that five round wins complete the match."""
        match = make_match()
        for _ in range(TARGET_SCORE):
            match.start_round(X)
            play_cells(match, HUMAN_WINS)
        assert match.state == TTTState.MATCH_COMPLETE
        assert match.winner == "human"

    def test_no_round_after_match(self):
        """Test that a finished match refuses new rounds."""
        match = make_match()
        for _ in range(TARGET_SCORE):
            match.start_round(X)
            play_cells(match, HUMAN_WINS)
        with pytest.raises(InvalidStateError):
            match.start_round(X)

    def test_ties_do_not_finish_match(self):
        """Test that ties never end the match."""
        match = make_match()
        for _ in range(TARGET_SCORE + 2):
            match.start_round(X)
            play_cells(match, TIE)
        assert match.state == TTTState.ROUND_COMPLETE
        assert match.winner is None


class TestSnapshot:
    """Tests for snapshot()."""

    def test_snapshot(self):
        """Test the view handed to the screen."""
        match = make_match(O)
        match.start_round(O)
        match.place(5)
        view = match.snapshot()
        assert view["cells"][5] == "O"
        assert view["human_marker"] == "O"
        assert view["computer_marker"] == "X"
        assert view["current_marker"] == "X"
        assert view["state"] == "AWAITING_MOVE"
