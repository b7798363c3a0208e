"""
Win checker for Teeko.
Checks if a player has four pieces in a winning shape.
"""

from typing import List, Optional, Tuple

from .board import Board, CellState, Player
from .config import GameConfig

Pattern = Tuple[Tuple[int, int], ...]


def build_patterns(width: int, height: int, length: int) -> List[Pattern]:
    """
    All winning shapes on a width x height board.

    Lines of `length` cells in a row, column or diagonal, plus every
    solid 2x2 square.
    """
    patterns: List[Pattern] = []
    directions = [(1, 0), (0, 1), (1, 1), (1, -1)]

    for x in range(width):
        for y in range(height):
            for dx, dy in directions:
                end_x = x + dx * (length - 1)
                end_y = y + dy * (length - 1)
                if 0 <= end_x < width and 0 <= end_y < height:
                    patterns.append(tuple((x + dx * i, y + dy * i) for i in range(length)))

    # Squares
    for x in range(width - 1):
        for y in range(height - 1):
            patterns.append(((x, y), (x + 1, y), (x, y + 1), (x + 1, y + 1)))

    return patterns


class WinChecker:
    """
    Checks for win conditions in Teeko.

    Win condition: 4 pieces of the same player in a straight line
    (horizontally, vertically, or diagonally) or in a 2x2 square.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.patterns = build_patterns(
            self.config.WIDTH, self.config.HEIGHT, self.config.WIN_LENGTH
        )

    def evaluate(self, board: Board, player: Player) -> bool:
        """
        Check if the player has won.

        Args:
            board: The board to check.
            player: The player to check for.

        Returns:
            True if the player's pieces form a winning shape.
        """
        return self.get_winning_pattern(board, player) is not None

    def get_winning_pattern(self, board: Board, player: Player) -> Optional[Pattern]:
        """The first winning shape the player has completed, or None."""
        target = CellState.for_player(player)
        for pattern in self.patterns:
            if all(board.cell_at(x, y) == target for x, y in pattern):
                return pattern
        return None

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for player in Player:
            if self.evaluate(board, player):
                return player
        return None


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()
    print(f"Winning shapes on a 5x5 board: {len(checker.patterns)}")

    board = Board()
    for x in range(4):
        board.set_cell(x, 0, CellState.PLAYER_A)
    print(board.pretty())

    winner = checker.check_winner(board)
    print(f"Row test: winner = {winner}")
    assert winner == Player.A

    print("\nWinChecker test done!")
