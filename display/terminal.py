"""
Terminal status output for Teeko.
Turns game notifications into the status lines shown to the players.
"""

from typing import Callable, List, Optional

from logic.board import Player
from logic.game_state import GameOver, PauseChanged, Phase, PhaseChanged, PlayerChanged

PLAYER_COLOURS = {
    Player.A: "green",
    Player.B: "red",
}

PHASE_NAMES = {
    Phase.DROP: "drop a piece",
    Phase.PICK_UP: "pick up a piece",
    Phase.PUT_DOWN: "put the piece down",
}


class StatusPrinter:
    """
    Formats notifications and prints them.

    The last lines printed are kept in `lines` so a UI can show them too.
    """

    def __init__(self, output: Optional[Callable[[str], None]] = None):
        """
        Args:
            output: Where to send each line (defaults to print).
        """
        self.output = output or print
        self.lines: List[str] = []

    def format(self, notification) -> List[str]:
        """
        Get the status lines for a notification.

        Returns:
            List of text lines (empty for unknown notifications).
        """
        if isinstance(notification, PlayerChanged):
            player = notification.player
            return [f"Current player: {player.number}, {PLAYER_COLOURS[player]}"]
        if isinstance(notification, PhaseChanged):
            phase = notification.phase
            return [f"Current phase: {phase.value} ({PHASE_NAMES[phase]})"]
        if isinstance(notification, GameOver):
            return [
                "GAME OVER",
                f"Winner is {notification.winner.number}",
                "Press a button to start again",
            ]
        if isinstance(notification, PauseChanged):
            return ["Paused" if notification.paused else "Resumed"]
        return []

    def show(self, notifications) -> List[str]:
        """Print the lines for each notification, in order."""
        printed = []
        for notification in notifications:
            for line in self.format(notification):
                self.output(line)
                printed.append(line)
        if printed:
            self.lines = printed
        return printed
