"""
Main orchestration script for Teeko.

This script ties together:
- Controls (keyboard and push button input)
- Logic (board, cursor, turn phases, win detection)
- Display (LED matrix and terminal status lines)

Run this script to play Teeko!
"""

import sys
import time
from typing import Optional

# Logic imports
from logic.config import GameConfig
from logic.session import GameSession, SelectResult

# Display imports
from display.config import DisplayConfig
from display.led_matrix import LedMatrix
from display.terminal import StatusPrinter

# Controls imports
from controls.config import ControlsConfig
from controls.events import InputEvent
from controls.input_source import InputPoll, InputSource


class TeekoController:
    """
    Main controller for a Teeko game.

    Game loop:
    1. Poll the input source for the next move and/or action, in press order
    2. Hand them to the game session
    3. Push the changed cells to the LED matrix
    4. Print any status changes
    5. Advance the cursor blink timer
    """

    def __init__(
        self,
        game_config: Optional[GameConfig] = None,
        display_config: Optional[DisplayConfig] = None,
        controls_config: Optional[ControlsConfig] = None,
        printer: Optional[StatusPrinter] = None
    ):
        """
        Initialize the game.

        Args:
            game_config: Game rules configuration.
            display_config: LED matrix configuration.
            controls_config: Key and button bindings.
            printer: Status sink (prints to the terminal by default).
        """
        self.game_config = game_config or GameConfig()
        self.session = GameSession(self.game_config)
        self.matrix = LedMatrix(display_config, self.game_config)
        self.inputs = InputSource(controls_config)
        self.printer = printer or StatusPrinter()

        # Valid move indicator (the LED next to the matrix)
        self.valid_indicator = False
        self.last_result: Optional[SelectResult] = None

    def start(self):
        """Draw the empty board and announce the first turn."""
        self.matrix.initialise()
        self.inputs.clear()
        self.printer.show(self.session.start_notifications())
        self._update_indicator()

    def restart(self):
        """Start a new game after the last one finished."""
        self.matrix.initialise()
        self.inputs.clear()
        self.last_result = None
        self.printer.show(self.session.restart())
        self._update_indicator()

    def process(self, poll: InputPoll):
        """
        Handle one iteration's worth of input.

        Args:
            poll: At most one directional event, then at most one action.
        """
        if poll.directional is not None:
            dx, dy = poll.directional.delta
            self.matrix.apply(self.session.apply_directional(dx, dy))

        if poll.action == InputEvent.PAUSE:
            self.printer.show([self.session.toggle_pause()])
        elif poll.action == InputEvent.SELECT:
            self._handle_result(self.session.apply_select())
        elif poll.action == InputEvent.CANCEL:
            self._handle_result(self.session.apply_cancel())

        self._update_indicator()

    def step(self, elapsed_ms: float):
        """
        Run one loop iteration.

        Args:
            elapsed_ms: Milliseconds since the previous step.
        """
        self.process(self.inputs.poll())
        self.matrix.apply(self.session.tick(elapsed_ms))

    def _handle_result(self, result: SelectResult):
        self.last_result = result
        if not result.outcome.is_applied:
            if result.outcome.message:
                print(f"Invalid move: {result.outcome.message}")
            return
        self.matrix.apply(result.redraws)
        self.printer.show(result.notifications)

    def _update_indicator(self):
        self.valid_indicator = self.session.is_valid_target()

    def run_console(self):
        """
        Play in the terminal.

        Type keys and press Enter; each bound character is one input.
        Type 'q' on its own to quit, 'r' to restart after a game ends.
        """
        self.start()
        print(self.session.board.pretty())
        last = time.monotonic()

        while True:
            try:
                text = input("> ")
            except EOFError:
                break

            if text.strip().lower() == "q":
                print("\nGame quit by user.")
                break
            if text.strip().lower() == "r" and self.session.is_over():
                self.restart()
                print(self.session.board.pretty())
                continue

            self.inputs.feed_text(text)
            now = time.monotonic()
            elapsed = (now - last) * 1000
            last = now

            # One poll per loop iteration, like the hardware loop
            while self.inputs.pending():
                self.step(0)
            self.matrix.apply(self.session.tick(elapsed))

            self._print_board()

    def _print_board(self):
        board_text = self.session.board.pretty()
        x, y = self.session.cursor.position
        print(board_text)
        print(f"Cursor: ({x}, {y})  "
              f"{'valid' if self.valid_indicator else 'invalid'} target")
        if self.session.is_over():
            print("Type 'r' to play again or 'q' to quit.")


def load_game_config(blink_ms: int) -> GameConfig:
    """
    Build the game configuration from command line values.

    Exits with status 2 if the values do not make a playable game.
    """
    game_config = GameConfig()
    game_config.BLINK_INTERVAL_MS = blink_ms
    try:
        game_config.validate()
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(2)
    return game_config


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Teeko")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--blink-ms",
        type=int,
        default=GameConfig.BLINK_INTERVAL_MS,
        help="Cursor flash interval in milliseconds"
    )

    args = parser.parse_args()

    game_config = load_game_config(args.blink_ms)

    # Launch UI by default
    if not args.no_ui:
        from ui import TeekoUI
        print("\n" + "="*60)
        print("   Teeko")
        print("="*60 + "\n")
        ui = TeekoUI(game_config=game_config)
        ui.run()
        return

    # Console mode (--no-ui)
    print("\n" + "="*60)
    print("   Teeko - console mode")
    print("   w/a/s/d move, space select, c cancel, p pause, q quit")
    print("="*60 + "\n")

    controller = TeekoController(game_config=game_config)
    try:
        controller.run_console()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
