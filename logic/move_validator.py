"""
Move validator for Teeko.
Validates that moves follow the rules of the current phase.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, List

from .board import Board, CellState
from .config import GameConfig
from .game_state import Phase, TurnState


class Reason(Enum):
    """Why a move was rejected."""
    OCCUPIED_CELL = "occupied_cell"
    EMPTY_CELL = "empty_cell"
    WRONG_OWNER = "wrong_owner"
    NOT_ADJACENT = "not_adjacent"
    SAME_CELL = "same_cell"
    NONE_REMAINING = "none_remaining"
    NOTHING_PICKED_UP = "nothing_picked_up"
    PAUSED = "paused"
    GAME_OVER = "game_over"


REASON_MESSAGES = {
    Reason.OCCUPIED_CELL: "That cell is already occupied!",
    Reason.EMPTY_CELL: "There is no piece there to pick up!",
    Reason.WRONG_OWNER: "That piece belongs to the other player!",
    Reason.NOT_ADJACENT: "Pieces can only move to a neighbouring cell!",
    Reason.SAME_CELL: "Put the piece down somewhere else!",
    Reason.NONE_REMAINING: "No more pieces to place!",
    Reason.NOTHING_PICKED_UP: "No piece has been picked up!",
    Reason.PAUSED: "Game is paused!",
    Reason.GAME_OVER: "Game is already over!",
}


@dataclass(frozen=True)
class MoveOutcome:
    """Result of an attempted action."""
    is_applied: bool
    reason: Optional[Reason] = None

    @classmethod
    def applied(cls) -> "MoveOutcome":
        return cls(is_applied=True)

    @classmethod
    def rejected(cls, reason: Reason) -> "MoveOutcome":
        return cls(is_applied=False, reason=reason)

    @property
    def message(self) -> Optional[str]:
        if self.reason is None:
            return None
        return REASON_MESSAGES[self.reason]


def chebyshev(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    """King-move distance between two cells."""
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


class MoveValidator:
    """
    Validates Teeko moves.

    Rules:
    1. DROP: the cell must be empty and the player must have pieces left
    2. PICK_UP: the cell must hold one of the active player's pieces
    3. PUT_DOWN: the cell must be empty and next to (not on) the pick-up cell
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def check(
        self,
        board: Board,
        turn: TurnState,
        x: int,
        y: int,
        phase: Optional[Phase] = None
    ) -> Optional[Reason]:
        """
        Find out why a move at (x, y) would be rejected.

        Args:
            board: Current board.
            turn: Current turn state.
            x: Target column.
            y: Target row.
            phase: Phase to check against (defaults to the current one).

        Returns:
            The Reason for rejection, or None if the move is legal.
        """
        phase = phase or turn.phase
        cell = board.cell_at(x, y)
        player = turn.active_player

        if phase == Phase.DROP:
            if cell != CellState.EMPTY:
                return Reason.OCCUPIED_CELL
            if turn.pieces_of(player) >= self.config.MAX_PIECES:
                return Reason.NONE_REMAINING
            return None

        if phase == Phase.PICK_UP:
            if cell == CellState.EMPTY:
                return Reason.EMPTY_CELL
            if cell.owner != player:
                return Reason.WRONG_OWNER
            return None

        # PUT_DOWN
        origin = turn.picked_up_from
        if origin is None:
            return Reason.NOTHING_PICKED_UP
        if (x, y) == origin:
            return Reason.SAME_CELL
        if chebyshev((x, y), origin) != 1:
            return Reason.NOT_ADJACENT
        if cell != CellState.EMPTY:
            return Reason.OCCUPIED_CELL
        return None

    def validate_move(
        self,
        board: Board,
        turn: TurnState,
        x: int,
        y: int,
        phase: Optional[Phase] = None
    ) -> bool:
        """True if a move at (x, y) is legal in the given phase."""
        return self.check(board, turn, x, y, phase) is None

    def get_valid_moves(self, board: Board, turn: TurnState) -> List[Tuple[int, int]]:
        """
        Get all cells where the active player could act right now.

        Returns:
            List of (x, y) positions.
        """
        return [
            (x, y)
            for x in range(board.width)
            for y in range(board.height)
            if self.validate_move(board, turn, x, y)
        ]
