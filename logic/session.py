"""
Game session for Teeko.
Ties the board, cursor, phase engine and win checker together.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .board import Board, Player
from .config import GameConfig
from .cursor import Cursor, RedrawCell
from .game_state import (
    GameOver, Notification, PauseChanged, Phase, PhaseChanged, PlayerChanged, TurnState
)
from .move_validator import MoveOutcome, Reason
from .phase_engine import EngineStep, PhaseEngine
from .win_checker import WinChecker


@dataclass
class SelectResult:
    """Result of a select (or cancel) action."""
    outcome: MoveOutcome
    redraws: List[RedrawCell] = field(default_factory=list)
    notifications: List[Notification] = field(default_factory=list)
    winner: Optional[Player] = None


class GameSession:
    """
    One game of Teeko.

    All game data lives here; there is no global state, so several
    sessions can run side by side. Time is never read from a clock:
    the caller passes elapsed milliseconds to tick().
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Start a new game.

        Args:
            config: Game configuration. Uses defaults if not provided.
        """
        self.config = (config or GameConfig()).validate()
        self._board = Board(self.config)
        self._cursor = Cursor(self._board, self.config)
        self.engine = PhaseEngine(self._board, self._cursor, self.config)
        self.win_checker = WinChecker(self.config)

        self._winner: Optional[Player] = None
        self._paused = False
        self._blink_elapsed = 0.0

    # ==================== STATE ====================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def turn(self) -> TurnState:
        return self.engine.turn

    @property
    def phase(self) -> Phase:
        return self.engine.phase

    @property
    def active_player(self) -> Player:
        return self.engine.active_player

    @property
    def paused(self) -> bool:
        return self._paused

    def is_over(self) -> bool:
        return self._winner is not None

    def winner(self) -> Optional[Player]:
        return self._winner

    def is_valid_target(self) -> bool:
        """Whether selecting at the cursor would succeed (for the indicator LED)."""
        if self.is_over():
            return False
        return self.engine.validate_move()

    def start_notifications(self) -> List[Notification]:
        """Status to show when a game begins."""
        return [PlayerChanged(self.active_player), PhaseChanged(self.phase)]

    def restart(self) -> List[Notification]:
        """
        Reset everything for a new game.

        Returns:
            The start notifications for the new game.
        """
        self._board.clear()
        self._cursor.reset()
        self.engine.reset()
        self._winner = None
        self._paused = False
        self._blink_elapsed = 0.0
        return self.start_notifications()

    # ==================== INPUT ====================

    def apply_directional(self, dx: int, dy: int) -> List[RedrawCell]:
        """
        Move the cursor.

        Returns:
            Cells to redraw (nothing while paused or after the game ended).
        """
        if self._paused or self.is_over():
            return []
        self._blink_elapsed = 0.0
        return self._cursor.move_by(dx, dy)

    def apply_select(self) -> SelectResult:
        """
        Act at the cursor according to the current phase.

        Returns:
            SelectResult with the outcome, redraws, notifications and
            the winner if this move ended the game.
        """
        blocked = self._blocked_reason()
        if blocked is not None:
            return SelectResult(MoveOutcome.rejected(blocked))
        return self._finish(self.engine.select())

    def apply_cancel(self) -> SelectResult:
        """Abandon a pick-up, putting the piece back."""
        blocked = self._blocked_reason()
        if blocked is not None:
            return SelectResult(MoveOutcome.rejected(blocked))
        return self._finish(self.engine.cancel_pick_up())

    def toggle_pause(self) -> PauseChanged:
        self._paused = not self._paused
        return PauseChanged(self._paused)

    def tick(self, elapsed_ms: float) -> List[RedrawCell]:
        """
        Advance the blink timer.

        Args:
            elapsed_ms: Milliseconds since the previous tick.

        Returns:
            Cells to redraw if the cursor flashed, else an empty list.
        """
        self._blink_elapsed += elapsed_ms
        if self._blink_elapsed < self.config.BLINK_INTERVAL_MS:
            return []
        self._blink_elapsed = 0.0
        return self._cursor.tick_blink()

    def _blocked_reason(self) -> Optional[Reason]:
        if self.is_over():
            return Reason.GAME_OVER
        if self._paused:
            return Reason.PAUSED
        return None

    def _finish(self, step: EngineStep) -> SelectResult:
        result = SelectResult(step.outcome, step.redraws, step.notifications)
        if step.placed_by is not None and self.win_checker.evaluate(self._board, step.placed_by):
            self._winner = step.placed_by
            result.winner = step.placed_by
            result.notifications.append(GameOver(step.placed_by))
        return result
