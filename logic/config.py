"""
Game configuration for Teeko.
Board size, piece limits and cursor timing.
"""


class GameConfig:
    """
    Configuration class for the game rules.
    Change these values to play on a different board!
    """

    # ==================== BOARD SETTINGS ====================
    # Teeko is played on a 5x5 grid
    WIDTH = 5
    HEIGHT = 5

    # Each player drops this many pieces before the moving phase
    MAX_PIECES = 4

    # Number of pieces in a row needed to win
    WIN_LENGTH = 4

    # ==================== CURSOR SETTINGS ====================
    # The cursor starts in the middle of the board
    CURSOR_X_START = WIDTH // 2
    CURSOR_Y_START = HEIGHT // 2

    # How often the cursor flashes (milliseconds)
    BLINK_INTERVAL_MS = 500

    def validate(self) -> "GameConfig":
        """
        Check the settings make a playable game.

        Returns:
            The config itself, so it can be chained.

        Raises:
            ValueError: If any setting is out of range.
        """
        if self.WIDTH < self.WIN_LENGTH and self.HEIGHT < self.WIN_LENGTH:
            raise ValueError(
                f"Board {self.WIDTH}x{self.HEIGHT} is too small for a line of {self.WIN_LENGTH}"
            )
        if self.MAX_PIECES < 1 or 2 * self.MAX_PIECES > self.WIDTH * self.HEIGHT:
            raise ValueError(f"MAX_PIECES must fit on the board, got {self.MAX_PIECES}")
        if self.BLINK_INTERVAL_MS <= 0:
            raise ValueError(f"BLINK_INTERVAL_MS must be positive, got {self.BLINK_INTERVAL_MS}")
        if not (0 <= self.CURSOR_X_START < self.WIDTH and 0 <= self.CURSOR_Y_START < self.HEIGHT):
            raise ValueError(
                f"Cursor start ({self.CURSOR_X_START}, {self.CURSOR_Y_START}) is off the board"
            )
        return self
