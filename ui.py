"""
Teeko UI
A graphical interface for Teeko using Tkinter.

Shows:
- LED matrix preview of the board and flashing cursor
- Current player and phase
- Valid move indicator
"""

import time
import tkinter as tk
from tkinter import ttk
from typing import Optional

from PIL import ImageTk

from logic.config import GameConfig
from logic.board import Player
from logic.game_state import Phase
from display.config import DisplayConfig
from display.terminal import PHASE_NAMES, PLAYER_COLOURS, StatusPrinter
from controls.config import ControlsConfig
from main import TeekoController, load_game_config


class TeekoUI:
    """
    Main UI class for Teeko.

    Keys are fed into the controller's input source; a timer on the UI
    thread runs one controller step per LOOP_INTERVAL_MS.
    """

    def __init__(
        self,
        game_config: Optional[GameConfig] = None,
        display_config: Optional[DisplayConfig] = None,
        controls_config: Optional[ControlsConfig] = None
    ):
        """Initialize the UI."""
        self.controls_config = controls_config or ControlsConfig()
        self.display_config = display_config or DisplayConfig()
        self.is_running = False
        self.last_step: Optional[float] = None

        self.controller = TeekoController(
            game_config=game_config,
            display_config=self.display_config,
            controls_config=self.controls_config,
            printer=StatusPrinter(),
        )

        # Create UI
        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("Teeko")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        ttk.Label(main_frame, text="Teeko", style='Title.TLabel').pack(pady=(0, 5))

        # LED matrix canvas
        scale = self.display_config.PREVIEW_SCALE
        self.matrix_canvas = tk.Canvas(
            main_frame,
            width=self.display_config.MATRIX_NUM_COLUMNS * scale,
            height=self.display_config.MATRIX_NUM_ROWS * scale,
            bg='#0f0f1a',
            highlightthickness=2,
            highlightbackground='#00d4ff'
        )
        self.matrix_canvas.pack()

        # Game status section
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        self.status_label = ttk.Label(main_frame, text="Press Start to play", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.turn_label = ttk.Label(main_frame, text="Turn: -")
        self.turn_label.pack()

        self.phase_label = ttk.Label(main_frame, text="Phase: -")
        self.phase_label.pack()

        # Valid move indicator
        self.indicator = tk.Label(main_frame, text="  ", width=2, bg='#2d3748', relief='ridge')
        self.indicator.pack(pady=5)

        ttk.Label(
            main_frame,
            text="w/a/s/d or arrows move, space selects, c cancels, p pauses"
        ).pack(pady=5)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        self.start_btn = tk.Button(
            control_frame,
            text="▶ Start Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=self._start_game
        )
        self.start_btn.pack(side=tk.LEFT, padx=5)

        self.reset_btn = tk.Button(
            control_frame,
            text="🔄 Reset",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        )
        self.reset_btn.pack(side=tk.LEFT, padx=5)

        tk.Button(
            main_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=26,
            command=self._quit
        ).pack(pady=10)

        self.root.bind('<Key>', self._on_key)
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_key(self, event):
        """Queue a key press for the next loop iteration."""
        if not self.is_running:
            return
        key = event.char if event.char else event.keysym
        if not self.controller.inputs.feed_key(key):
            self.controller.inputs.feed_key(event.keysym)

    def _start_game(self):
        """Start the game."""
        if self.is_running:
            return

        self.start_btn.configure(state='disabled')
        self.controller.start()
        self.is_running = True
        self.last_step = time.monotonic()
        self.status_label.configure(text="Game running!")
        self._update_loop()

    def _update_loop(self):
        """Main update loop (runs on UI thread)."""
        if not self.is_running:
            return

        try:
            now = time.monotonic()
            elapsed_ms = (now - self.last_step) * 1000
            self.last_step = now

            self.controller.step(elapsed_ms)

            self._update_matrix_canvas()
            self._update_game_info()

        except Exception as e:
            print(f"Update error: {e}")

        if self.is_running:
            self.root.after(self.controls_config.LOOP_INTERVAL_MS, self._update_loop)

    def _update_matrix_canvas(self):
        """Draw the LED matrix onto the canvas."""
        photo = ImageTk.PhotoImage(self.controller.matrix.to_image())
        self.matrix_canvas.delete("all")
        self.matrix_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.matrix_canvas.image = photo  # Keep reference

    def _update_game_info(self):
        """Update game status labels."""
        session = self.controller.session

        if session.is_over():
            winner: Player = session.winner()
            self.status_label.configure(
                text=f"🏆 Player {winner.number} ({PLAYER_COLOURS[winner]}) WINS!"
            )
            self.turn_label.configure(text="Game Over - press Reset to play again")
        else:
            player = session.active_player
            self.turn_label.configure(
                text=f"Turn: Player {player.number} ({PLAYER_COLOURS[player]})"
            )
            self.status_label.configure(text="Paused" if session.paused else "Game in progress")

        phase: Phase = session.phase
        self.phase_label.configure(text=f"Phase {phase.value}: {PHASE_NAMES[phase]}")

        self.indicator.configure(bg='#10b981' if self.controller.valid_indicator else '#ef4444')

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        if not self.is_running:
            self._start_game()
            return
        self.controller.restart()
        self.status_label.configure(text="Game reset!")

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.is_running = False
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Teeko UI")
    parser.add_argument(
        "--blink-ms",
        type=int,
        default=GameConfig.BLINK_INTERVAL_MS,
        help="Cursor flash interval in milliseconds"
    )

    args = parser.parse_args()

    game_config = load_game_config(args.blink_ms)

    print("\n" + "="*60)
    print("   Teeko UI")
    print("="*60 + "\n")

    ui = TeekoUI(game_config=game_config)
    ui.run()


if __name__ == "__main__":
    main()
