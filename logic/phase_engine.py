"""
Phase engine for Teeko.
The turn state machine: drop, pick up, put down.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .board import Board, CellState, Player
from .config import GameConfig
from .cursor import Cursor, CursorGlyph, RedrawCell, VisualState
from .game_state import Notification, Phase, PhaseChanged, PlayerChanged, TurnState
from .move_validator import MoveOutcome, MoveValidator, Reason


@dataclass
class EngineStep:
    """
    What happened when the engine handled an action.

    placed_by is set when a piece came to rest on the board, so the
    caller knows whose win to check for.
    """
    outcome: MoveOutcome
    redraws: List[RedrawCell] = field(default_factory=list)
    notifications: List[Notification] = field(default_factory=list)
    placed_by: Optional[Player] = None


class PhaseEngine:
    """
    Applies the select action according to the current phase.

    Transition table:
        DROP     -> DROP (or PICK_UP once both players placed all pieces)
        PICK_UP  -> PUT_DOWN
        PUT_DOWN -> PICK_UP

    Rejected moves never change any state.
    """

    def __init__(
        self,
        board: Board,
        cursor: Cursor,
        config: Optional[GameConfig] = None,
        validator: Optional[MoveValidator] = None
    ):
        """
        Initialize the engine.

        Args:
            board: The board pieces are placed on.
            cursor: The cursor selecting the target cell.
            config: Game configuration.
            validator: Move validator (a default one is created if not provided).
        """
        self.board = board
        self.cursor = cursor
        self.config = config or board.config
        self.validator = validator or MoveValidator(self.config)
        self.turn = TurnState()

        self._transitions: Dict[Phase, Callable[[int, int], EngineStep]] = {
            Phase.DROP: self._drop,
            Phase.PICK_UP: self._pick_up,
            Phase.PUT_DOWN: self._put_down,
        }

    def reset(self):
        self.turn = TurnState()

    @property
    def phase(self) -> Phase:
        return self.turn.phase

    @property
    def active_player(self) -> Player:
        return self.turn.active_player

    def check(self, phase: Optional[Phase] = None) -> Optional[Reason]:
        """Why selecting at the cursor would be rejected, or None."""
        x, y = self.cursor.position
        return self.validator.check(self.board, self.turn, x, y, phase)

    def validate_move(self, phase: Optional[Phase] = None) -> bool:
        """True if selecting at the cursor is legal in the given phase."""
        return self.check(phase) is None

    def select(self) -> EngineStep:
        """
        Handle the select action at the cursor position.

        Returns:
            EngineStep describing the outcome and the cells to redraw.
        """
        reason = self.check()
        if reason is not None:
            return EngineStep(MoveOutcome.rejected(reason))

        x, y = self.cursor.position
        return self._transitions[self.turn.phase](x, y)

    def _drop(self, x: int, y: int) -> EngineStep:
        player = self.turn.active_player
        self._place(x, y, player)

        step = EngineStep(MoveOutcome.applied(), placed_by=player)
        step.redraws.append(RedrawCell(x, y, VisualState.from_cell(self.board.cell_at(x, y))))
        step.notifications.append(PlayerChanged(self.turn.switch_player()))

        if all(count >= self.config.MAX_PIECES for count in self.turn.pieces_placed.values()):
            self.turn.phase = Phase.PICK_UP
            step.notifications.append(PhaseChanged(Phase.PICK_UP))

        self.cursor.hide()
        return step

    def _pick_up(self, x: int, y: int) -> EngineStep:
        player = self.turn.active_player
        self.board.set_cell(x, y, CellState.EMPTY)
        self.turn.pieces_placed[player] -= 1
        self.turn.picked_up_from = (x, y)
        self.turn.phase = Phase.PUT_DOWN

        # Show the lifted piece straight away
        self.cursor.set_glyph(CursorGlyph.PICK_UP)
        self.cursor.visible = True

        step = EngineStep(MoveOutcome.applied())
        step.redraws.append(RedrawCell(x, y, VisualState.PICK_UP_CURSOR))
        step.notifications.append(PhaseChanged(Phase.PUT_DOWN))
        return step

    def _put_down(self, x: int, y: int) -> EngineStep:
        player = self.turn.active_player
        self._place(x, y, player)
        self.turn.picked_up_from = None
        self.turn.phase = Phase.PICK_UP
        self.cursor.set_glyph(CursorGlyph.SELECT)

        step = EngineStep(MoveOutcome.applied(), placed_by=player)
        step.redraws.append(RedrawCell(x, y, VisualState.from_cell(self.board.cell_at(x, y))))
        step.notifications.append(PlayerChanged(self.turn.switch_player()))
        step.notifications.append(PhaseChanged(Phase.PICK_UP))

        self.cursor.hide()
        return step

    def cancel_pick_up(self) -> EngineStep:
        """
        Put a lifted piece back where it came from.

        The same player then picks up again.
        """
        origin = self.turn.picked_up_from
        if self.turn.phase != Phase.PUT_DOWN or origin is None:
            return EngineStep(MoveOutcome.rejected(Reason.NOTHING_PICKED_UP))

        ox, oy = origin
        self._place(ox, oy, self.turn.active_player)
        self.turn.picked_up_from = None
        self.turn.phase = Phase.PICK_UP
        self.cursor.set_glyph(CursorGlyph.SELECT)

        step = EngineStep(MoveOutcome.applied())
        step.redraws.append(RedrawCell(ox, oy, VisualState.from_cell(self.board.cell_at(ox, oy))))
        if self.cursor.position == origin:
            self.cursor.hide()
        elif self.cursor.visible:
            step.redraws.append(RedrawCell(self.cursor.x, self.cursor.y, VisualState.CURSOR))
        step.notifications.append(PhaseChanged(Phase.PICK_UP))
        return step

    def _place(self, x: int, y: int, player: Player):
        self.board.set_cell(x, y, CellState.for_player(player))
        self.turn.pieces_placed[player] += 1
