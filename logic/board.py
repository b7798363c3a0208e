"""
Board for Teeko.
Stores which player's piece sits on each cell of the grid.
"""

from enum import Enum, IntEnum
from typing import List, Optional, Tuple

import numpy as np

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    A = 1   # Player 1, green
    B = 2   # Player 2, red

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.B if self == Player.A else Player.A

    @property
    def number(self) -> int:
        """Player number as shown to humans (1 or 2)."""
        return self.value


class CellState(IntEnum):
    """What can be on a board cell."""
    EMPTY = 0
    PLAYER_A = 1
    PLAYER_B = 2

    @classmethod
    def for_player(cls, player: Player) -> "CellState":
        return cls.PLAYER_A if player == Player.A else cls.PLAYER_B

    @property
    def owner(self) -> Optional[Player]:
        """The player owning this cell, or None if empty."""
        if self == CellState.EMPTY:
            return None
        return Player(int(self))


class Board:
    """
    The Teeko grid.

    Cells are indexed as [x, y] with (0, 0) in the bottom-left corner,
    the same way the LED matrix is addressed. Board does no rule checking,
    that is the job of the PhaseEngine.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Create an empty board.

        Args:
            config: Game configuration. Uses defaults if not provided.
        """
        self.config = config or GameConfig()
        self.width = self.config.WIDTH
        self.height = self.config.HEIGHT
        self.grid = np.zeros((self.width, self.height), dtype=np.int8)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> CellState:
        """
        Get the piece at (x, y).

        Anything outside the bounds of the board is EMPTY.
        """
        if not self.in_bounds(x, y):
            return CellState.EMPTY
        return CellState(int(self.grid[x, y]))

    def set_cell(self, x: int, y: int, state: CellState):
        """Overwrite the cell at (x, y). Coordinates must be on the board."""
        self.grid[x, y] = int(state)

    def count(self, player: Player) -> int:
        """Number of pieces the player has on the board."""
        return int(np.count_nonzero(self.grid == int(CellState.for_player(player))))

    def cells_of(self, player: Player) -> List[Tuple[int, int]]:
        """All (x, y) positions holding the player's pieces."""
        xs, ys = np.nonzero(self.grid == int(CellState.for_player(player)))
        return [(int(x), int(y)) for x, y in zip(xs, ys)]

    def empty_cells(self) -> List[Tuple[int, int]]:
        xs, ys = np.nonzero(self.grid == int(CellState.EMPTY))
        return [(int(x), int(y)) for x, y in zip(xs, ys)]

    def clear(self):
        self.grid.fill(int(CellState.EMPTY))

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        new_board = Board(self.config)
        new_board.grid = self.grid.copy()
        return new_board

    def pretty(self) -> str:
        """
        Text picture of the board, top row first.

        '1' and '2' are the players' pieces, '.' is an empty cell.
        """
        symbols = {CellState.EMPTY: ".", CellState.PLAYER_A: "1", CellState.PLAYER_B: "2"}
        lines = []
        for y in reversed(range(self.height)):
            row = " ".join(symbols[self.cell_at(x, y)] for x in range(self.width))
            lines.append(f"{y} {row}")
        lines.append("  " + " ".join(str(x) for x in range(self.width)))
        return "\n".join(lines)
