# Area: Shared
"""
console_games._shared.state_machine - Table-driven state machine
================================================================

Each game declares its states and events as Enums plus a transition table
of the form {current_state: {event: next_state}}. The machine validates and
executes transitions and refuses anything the table does not allow.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Dict, Generic, Mapping, TypeVar

from ..errors import InvalidStateError

S = TypeVar("S", bound=Enum)
E = TypeVar("E", bound=Enum)

logger = logging.getLogger("console_games.state_machine")


class StateMachine(Generic[S, E]):
    """
    State machine for round and match lifecycles.

    Attributes:
        game: Game name used in error messages and logs
        current_state: The current state of the machine
    """

    def __init__(self, game: str, transitions: Mapping[S, Mapping[E, S]], initial: S):
        self.game = game
        self._transitions: Dict[S, Mapping[E, S]] = dict(transitions)
        self.current_state: S = initial

    def can_transition(self, event: E) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        valid_transitions = self._transitions.get(self.current_state, {})
        return event in valid_transitions

    def transition(self, event: E) -> S:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            InvalidStateError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise InvalidStateError(
                game=self.game,
                operation=event.value,
                state=self.current_state.value,
            )

        next_state = self._transitions[self.current_state][event]
        logger.debug(
            f"{self.game}: {self.current_state.value} --{event.value}--> {next_state.value}"
        )
        self.current_state = next_state
        return next_state

    def require(self, operation: str, *states: S) -> None:
        """Raise InvalidStateError unless the machine is in one of `states`."""
        if self.current_state not in states:
            raise InvalidStateError(
                game=self.game,
                operation=operation,
                state=self.current_state.value,
            )
