"""
LED matrix display for Teeko.
Keeps the pixel colours of the matrix and renders preview images.
"""

from typing import Iterable, Optional

import numpy as np
from PIL import Image

from logic.config import GameConfig
from logic.cursor import RedrawCell, VisualState
from .config import DisplayConfig


class LedMatrix:
    """
    In-memory copy of the LED matrix.

    Pixels are stored as a (rows, columns, 3) RGB array with row 0 at
    the bottom of the matrix. Each set_cell_color call changes exactly
    one pixel.
    """

    def __init__(
        self,
        config: Optional[DisplayConfig] = None,
        game_config: Optional[GameConfig] = None
    ):
        """
        Initialize the matrix.

        Args:
            config: Display configuration.
            game_config: Game configuration (for the board size).
        """
        self.config = config or DisplayConfig()
        self.game_config = game_config or GameConfig()
        self.config.validate(self.game_config.WIDTH, self.game_config.HEIGHT)

        self.pixels = np.zeros(
            (self.config.MATRIX_NUM_ROWS, self.config.MATRIX_NUM_COLUMNS, 3),
            dtype=np.uint8
        )
        self.writes = 0

    def initialise(self):
        """Clear the matrix and draw the border around the empty board."""
        self.pixels[:, :] = self.config.COLOUR_BG
        x0 = self.config.MATRIX_X_OFFSET
        y0 = self.config.MATRIX_Y_OFFSET
        self.pixels[y0:y0 + self.game_config.HEIGHT, x0:x0 + self.game_config.WIDTH] = \
            self.config.COLOUR_EMPTY
        self.writes = 0

    def set_cell_color(self, x: int, y: int, visual: VisualState):
        """
        Colour the pixel for board cell (x, y).

        Args:
            x: Board column.
            y: Board row.
            visual: What to show there.
        """
        row = y + self.config.MATRIX_Y_OFFSET
        col = x + self.config.MATRIX_X_OFFSET
        self.pixels[row, col] = self.config.colour_for(visual)
        self.writes += 1

    def apply(self, redraws: Iterable[RedrawCell]):
        """Apply a list of redraw instructions from the game."""
        for cell in redraws:
            self.set_cell_color(cell.x, cell.y, cell.visual)

    def pixel_at(self, x: int, y: int):
        """RGB colour currently shown for board cell (x, y)."""
        row = y + self.config.MATRIX_Y_OFFSET
        col = x + self.config.MATRIX_X_OFFSET
        return tuple(int(c) for c in self.pixels[row, col])

    def to_image(self, scale: Optional[int] = None) -> Image.Image:
        """
        Render the matrix as a picture.

        Args:
            scale: Size of one LED in pixels (defaults to PREVIEW_SCALE).

        Returns:
            RGB PIL image, top row of the matrix at the top.
        """
        scale = scale or self.config.PREVIEW_SCALE
        flipped = np.ascontiguousarray(self.pixels[::-1])
        image = Image.fromarray(flipped)
        return image.resize(
            (self.config.MATRIX_NUM_COLUMNS * scale, self.config.MATRIX_NUM_ROWS * scale),
            Image.Resampling.NEAREST
        )
