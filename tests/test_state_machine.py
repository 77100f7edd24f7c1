# Area: Shared Tests
"""Tests for the table-driven StateMachine."""

import pytest
from console_games._shared.state_machine import StateMachine
from console_games._twenty_one.enums import RoundEvent, RoundState
from console_games._twenty_one.round import TRANSITIONS
from console_games.errors import InvalidStateError


def make_machine():
    return StateMachine("twenty_one", TRANSITIONS, RoundState.DEALING)


class TestStateMachineBase:
    """Tests for basic state machine functionality."""

    def test_initial_state(self):
        """Test that the machine starts in its initial state."""
        sm = make_machine()
        assert sm.current_state == RoundState.DEALING

    def test_can_transition_returns_true_for_valid(self):
        """Test can_transition for an event in the table."""
        sm = make_machine()
        assert sm.can_transition(RoundEvent.DEALT) is True

    def test_can_transition_returns_false_for_invalid(self):
        """Test can_transition for an event missing from the table."""
        sm = make_machine()
        assert sm.can_transition(RoundEvent.PLAYER_HIT) is False

    def test_transition_changes_state(self):
        """Test that transition returns and stores the new state."""
        sm = make_machine()
        assert sm.transition(RoundEvent.DEALT) == RoundState.PLAYER_TURN
        assert sm.current_state == RoundState.PLAYER_TURN

    def test_transition_raises_on_invalid(self):
        """Test that an invalid transition raises InvalidStateError."""
        sm = make_machine()
        with pytest.raises(InvalidStateError) as exc_info:
            sm.transition(RoundEvent.DEALER_DONE)
        assert exc_info.value.game == "twenty_one"
        assert exc_info.value.operation == "DEALER_DONE"
        assert exc_info.value.state == "DEALING"

    def test_failed_transition_keeps_state(self):
        """Test that a refused transition leaves the state alone."""
        sm = make_machine()
        with pytest.raises(InvalidStateError):
            sm.transition(RoundEvent.PLAYER_BUST)
        assert sm.current_state == RoundState.DEALING


class TestStateMachinePaths:
    """Tests for specific paths through a table."""

    def test_full_happy_path(self):
        """Test a hand from dealing to resolution."""
        sm = make_machine()

        # DEALING -> PLAYER_TURN
        sm.transition(RoundEvent.DEALT)
        # PLAYER_TURN -> PLAYER_TURN
        sm.transition(RoundEvent.PLAYER_HIT)
        assert sm.current_state == RoundState.PLAYER_TURN
        # PLAYER_TURN -> DEALER_TURN
        sm.transition(RoundEvent.PLAYER_DONE)
        # DEALER_TURN -> RESOLVED
        sm.transition(RoundEvent.DEALER_DONE)
        assert sm.current_state == RoundState.RESOLVED

    def test_terminal_state_accepts_nothing(self):
        """Test that RESOLVED has no way out."""
        sm = make_machine()
        sm.transition(RoundEvent.DEALT)
        sm.transition(RoundEvent.PLAYER_BUST)
        for event in RoundEvent:
            assert sm.can_transition(event) is False


class TestRequire:
    """Tests for require()."""

    def test_passes_in_listed_state(self):
        """Test that require() is silent in an allowed state."""
        sm = make_machine()
        sm.require("deal", RoundState.DEALING)

    def test_accepts_any_of_several_states(self):
        """Test require() with several allowed states."""
        sm = make_machine()
        sm.transition(RoundEvent.DEALT)
        sm.require("peek", RoundState.PLAYER_TURN, RoundState.DEALER_TURN)

    def test_raises_with_operation_name(self):
        """Test that require() reports the operation name."""
        sm = make_machine()
        with pytest.raises(InvalidStateError) as exc_info:
            sm.require("hit", RoundState.PLAYER_TURN)
        assert exc_info.value.operation == "hit"
        assert "'hit' is not allowed in state DEALING" in str(exc_info.value)
