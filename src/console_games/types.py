"""
console_games.types - TypedDict views handed to the front end
=============================================================

Each match or round exposes a snapshot() returning one of these plain
dictionaries. The console front end renders from them; it never reaches
into the core objects' private state.

Use __annotations__ to inspect fields:

    >>> RPSMatchView.__annotations__
    {'state': str, 'round_number': int, ...}
"""

from typing import Dict, List, Optional, TypedDict


# ============================================
# Rock-Paper-Scissors-Lizard-Spock
# ============================================

class RPSRoundView(TypedDict):
    """One entry of the RPS round history."""
    round_number: int       # 1, 2, 3, ...
    human_move: str         # e.g. "rock"
    computer_move: str      # e.g. "scissors"
    outcome: str            # HUMAN_WIN | COMPUTER_WIN | TIE


class RPSMatchView(TypedDict):
    """Snapshot of an RPS match.

    Fields
    ------
    state : str
        IN_PROGRESS or MATCH_COMPLETE.
    round_number : int
        Number of rounds played so far.
    human_score, computer_score : int
        Round wins per side.
    computer_name : str
        Name (and personality) of the opponent.
    winner : Optional[str]
        "human" or "computer" once the match is complete.
    history : List[RPSRoundView]
        Every round in the order it was played.
    """
    state: str
    round_number: int
    human_score: int
    computer_score: int
    computer_name: str
    winner: Optional[str]
    history: List[RPSRoundView]


# ============================================
# Tic-Tac-Toe
# ============================================

class TTTMatchView(TypedDict):
    """Snapshot of a Tic-Tac-Toe match.

    Fields
    ------
    cells : Dict[int, str]
        Cell index (1-9) to "X", "O" or " " for empty.
    human_marker, computer_marker : str
        Fixed for the whole match.
    current_marker : str
        Marker whose turn it is.
    state : str
        AWAITING_MOVE, ROUND_COMPLETE or MATCH_COMPLETE.
    round_winner : Optional[str]
        "human", "computer" or "tie" once the round is over.
    """
    cells: Dict[int, str]
    human_marker: str
    computer_marker: str
    current_marker: str
    human_score: int
    computer_score: int
    state: str
    round_winner: Optional[str]


# ============================================
# Twenty-One
# ============================================

class CardView(TypedDict):
    suit: str               # Heart | Diamond | Spades | Clubs
    face: str               # 2..10 | J | Q | K | A


class TwentyOneView(TypedDict):
    """Snapshot of a Twenty-One hand.

    Fields
    ------
    state : str
        DEALING, PLAYER_TURN, DEALER_TURN or RESOLVED.
    player_cards, dealer_cards : List[CardView]
        Cards in the order they were dealt.
    player_total, dealer_total : int
        Hand totals after ace demotion.
    outcome : Optional[str]
        PLAYER_WIN, DEALER_WIN or TIE once resolved.
    """
    state: str
    player_cards: List[CardView]
    dealer_cards: List[CardView]
    player_total: int
    dealer_total: int
    outcome: Optional[str]
