# Area: RPS
"""
console_games._rps.match - RPS match state
==========================================

Tracks scores, the round counter and the round history of one match.
The first side to reach TARGET_SCORE round wins takes the match.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .._shared.participant import Participant
from .._shared.randomness import RandomSource, make_random
from .._shared.state_machine import StateMachine
from ..types import RPSMatchView, RPSRoundView
from .enums import Move, Outcome, RPSEvent, RPSState
from .personalities import Personality, choose, personality_for
from .rules import evaluate

logger = logging.getLogger("console_games.rps")

TARGET_SCORE = 10

TRANSITIONS = {
    RPSState.IN_PROGRESS: {
        RPSEvent.ROUND_PLAYED: RPSState.IN_PROGRESS,
        RPSEvent.TARGET_REACHED: RPSState.MATCH_COMPLETE,
    },
    RPSState.MATCH_COMPLETE: {},
}


@dataclass(frozen=True)
class RoundResult:
    """
    Outcome of a single round.

    Attributes:
        round_number: 1-based round counter
        human_move: Move chosen by the human
        computer_move: Move chosen by the computer
        outcome: Who won the round
    """

    round_number: int
    human_move: Move
    computer_move: Move
    outcome: Outcome

    def to_view(self) -> RPSRoundView:
        return {
            "round_number": self.round_number,
            "human_move": self.human_move.value,
            "computer_move": self.computer_move.value,
            "outcome": self.outcome.value,
        }


@dataclass
class RPSMatch:
    """
    One RPS-Lizard-Spock match against a computer personality.

    Attributes:
        computer: Opponent seat; its name selects the personality
        rng: Random source used for the computer's moves
        human_score: Rounds won by the human
        computer_score: Rounds won by the computer
        round_number: Rounds played so far
        history: Append-only list of RoundResult in play order
    """

    computer: Participant
    rng: RandomSource = field(default_factory=make_random)
    human_score: int = 0
    computer_score: int = 0
    round_number: int = 0
    history: List[RoundResult] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.personality: Personality = personality_for(self.computer.name)
        self._machine = StateMachine("rps", TRANSITIONS, RPSState.IN_PROGRESS)

    @property
    def state(self) -> RPSState:
        return self._machine.current_state

    @property
    def is_complete(self) -> bool:
        return self.state == RPSState.MATCH_COMPLETE

    @property
    def winner(self) -> Optional[str]:
        """'human' or 'computer' once the match is complete, else None."""
        if not self.is_complete:
            return None
        return "human" if self.human_score == TARGET_SCORE else "computer"

    def choose_computer_move(self) -> Move:
        return choose(self.personality, self.rng)

    def play_round(self, human_move: Move, computer_move: Optional[Move] = None) -> RoundResult:
        """
        Play one round and update the match.

        Args:
            human_move: The human's validated move
            computer_move: Override for the computer's move; drawn from the
                personality when omitted

        Returns:
            The RoundResult appended to history

        Raises:
            InvalidStateError: If the match is already complete
        """
        self._machine.require("play_round", RPSState.IN_PROGRESS)

        if computer_move is None:
            computer_move = self.choose_computer_move()

        self.round_number += 1
        outcome = evaluate(human_move, computer_move)
        if outcome == Outcome.HUMAN_WIN:
            self.human_score += 1
        elif outcome == Outcome.COMPUTER_WIN:
            self.computer_score += 1

        result = RoundResult(self.round_number, human_move, computer_move, outcome)
        self.history.append(result)
        logger.info(
            f"Round {self.round_number}: {human_move} vs {computer_move} -> {outcome.value} "
            f"({self.human_score}-{self.computer_score})"
        )

        if TARGET_SCORE in (self.human_score, self.computer_score):
            self._machine.transition(RPSEvent.TARGET_REACHED)
            logger.info(f"Match complete, winner: {self.winner}")
        else:
            self._machine.transition(RPSEvent.ROUND_PLAYED)
        return result

    def snapshot(self) -> RPSMatchView:
        return {
            "state": self.state.value,
            "round_number": self.round_number,
            "human_score": self.human_score,
            "computer_score": self.computer_score,
            "computer_name": self.computer.name,
            "winner": self.winner,
            "history": [r.to_view() for r in self.history],
        }
