"""
Cursor for Teeko.
Tracks the selected cell, wraps around the board edges and flashes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .board import Board, CellState
from .config import GameConfig


class CursorGlyph(Enum):
    """Which cursor icon is shown."""
    SELECT = "select"      # Normal cursor
    PICK_UP = "pick_up"    # Holding a lifted piece


class VisualState(Enum):
    """Everything a single board cell can be drawn as."""
    EMPTY = "empty"
    PLAYER_A = "player_a"
    PLAYER_B = "player_b"
    CURSOR = "cursor"
    PICK_UP_CURSOR = "pick_up_cursor"

    @classmethod
    def from_cell(cls, cell: CellState) -> "VisualState":
        if cell == CellState.PLAYER_A:
            return cls.PLAYER_A
        if cell == CellState.PLAYER_B:
            return cls.PLAYER_B
        return cls.EMPTY

    @classmethod
    def from_glyph(cls, glyph: CursorGlyph) -> "VisualState":
        return cls.PICK_UP_CURSOR if glyph == CursorGlyph.PICK_UP else cls.CURSOR


@dataclass(frozen=True)
class RedrawCell:
    """
    One cell the display needs to redraw.
    """
    x: int
    y: int
    visual: VisualState


def normalize(value: int, modulus: int) -> int:
    """Wrap value into [0, modulus), also for negative values."""
    return ((value % modulus) + modulus) % modulus


class Cursor:
    """
    The flashing cursor the players move around the board.

    Position always stays on the board: moving off one edge comes back
    in on the opposite edge.
    """

    def __init__(self, board: Board, config: Optional[GameConfig] = None):
        """
        Initialize the cursor at the start position.

        Args:
            board: The board the cursor moves over (used for bounds and
                   for what to show underneath the cursor).
            config: Game configuration.
        """
        self.board = board
        self.config = config or board.config
        self.reset()

    def reset(self):
        """Back to the start position, hidden, normal glyph."""
        self.x = self.config.CURSOR_X_START
        self.y = self.config.CURSOR_Y_START
        self.visible = False
        self.glyph = CursorGlyph.SELECT

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def set_glyph(self, glyph: CursorGlyph):
        self.glyph = glyph

    def hide(self):
        """Hide the cursor until the next blink."""
        self.visible = False

    def _underlying(self, x: int, y: int) -> RedrawCell:
        return RedrawCell(x, y, VisualState.from_cell(self.board.cell_at(x, y)))

    def _current(self) -> RedrawCell:
        if self.visible:
            return RedrawCell(self.x, self.y, VisualState.from_glyph(self.glyph))
        return self._underlying(self.x, self.y)

    def move_by(self, dx: int, dy: int) -> List[RedrawCell]:
        """
        Move the cursor by (dx, dy), wrapping around the edges.

        The cursor is shown straight away at its new position.

        Args:
            dx: Change in x (negative is left).
            dy: Change in y (negative is down).

        Returns:
            Cells to redraw: the old cell with the piece underneath it,
            then the new cell with the cursor glyph.
        """
        old_x, old_y = self.x, self.y
        self.x = normalize(self.x + dx, self.board.width)
        self.y = normalize(self.y + dy, self.board.height)
        self.visible = True

        redraws = []
        if (old_x, old_y) != (self.x, self.y):
            redraws.append(self._underlying(old_x, old_y))
        redraws.append(self._current())
        return redraws

    def tick_blink(self) -> List[RedrawCell]:
        """
        Flip the cursor visibility.

        Call this at regular intervals to have the cursor flash.

        Returns:
            The cursor cell, drawn as the glyph or as the piece beneath it.
        """
        self.visible = not self.visible
        return [self._current()]
