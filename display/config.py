"""
Display configuration for Teeko.
LED matrix size, board placement and colours.
"""

from logic.cursor import VisualState


class DisplayConfig:
    """
    Configuration class for the LED matrix display.
    Change these values based on your matrix!
    """

    # ==================== MATRIX SETTINGS ====================
    # The LED matrix is 16 columns by 8 rows
    MATRIX_NUM_COLUMNS = 16
    MATRIX_NUM_ROWS = 8

    # Where the bottom-left board cell sits on the matrix
    # (the 5x5 board is centred)
    MATRIX_X_OFFSET = 5
    MATRIX_Y_OFFSET = 1

    # ==================== COLOURS (R, G, B) ====================
    COLOUR_BG = (40, 40, 40)          # Border around the board
    COLOUR_EMPTY = (0, 0, 0)
    COLOUR_P1 = (0, 200, 0)           # Player 1, green
    COLOUR_P2 = (220, 0, 0)           # Player 2, red
    COLOUR_CURSOR = (255, 200, 0)     # Yellow
    COLOUR_PICK_CURSOR = (255, 110, 0)  # Orange

    # ==================== PREVIEW SETTINGS ====================
    # Size of one LED in the preview image (pixels)
    PREVIEW_SCALE = 40

    def colour_for(self, visual: VisualState):
        """RGB colour to show for a visual state. Unknown states are black."""
        return {
            VisualState.EMPTY: self.COLOUR_EMPTY,
            VisualState.PLAYER_A: self.COLOUR_P1,
            VisualState.PLAYER_B: self.COLOUR_P2,
            VisualState.CURSOR: self.COLOUR_CURSOR,
            VisualState.PICK_UP_CURSOR: self.COLOUR_PICK_CURSOR,
        }.get(visual, self.COLOUR_EMPTY)

    def validate(self, board_width: int, board_height: int) -> "DisplayConfig":
        """
        Check the board fits on the matrix.

        Raises:
            ValueError: If the board would fall off the matrix.
        """
        if (self.MATRIX_X_OFFSET < 0 or self.MATRIX_Y_OFFSET < 0
                or self.MATRIX_X_OFFSET + board_width > self.MATRIX_NUM_COLUMNS
                or self.MATRIX_Y_OFFSET + board_height > self.MATRIX_NUM_ROWS):
            raise ValueError(
                f"A {board_width}x{board_height} board at offset "
                f"({self.MATRIX_X_OFFSET}, {self.MATRIX_Y_OFFSET}) does not fit a "
                f"{self.MATRIX_NUM_COLUMNS}x{self.MATRIX_NUM_ROWS} matrix"
            )
        return self
