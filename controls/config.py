"""
Controls configuration for Teeko.
Key and push button bindings.
"""

from .events import InputEvent


class ControlsConfig:
    """
    Configuration for the player controls.
    Change these bindings to suit your keyboard or button board!
    """

    # ==================== SERIAL / KEYBOARD ====================
    # Single characters, matched case-insensitively
    KEY_BINDINGS = {
        "w": InputEvent.UP,
        "a": InputEvent.LEFT,
        "s": InputEvent.DOWN,
        "d": InputEvent.RIGHT,
        " ": InputEvent.SELECT,
        "p": InputEvent.PAUSE,
        "c": InputEvent.CANCEL,
    }

    # Tkinter key names (for keys that are not a single character)
    KEYSYM_BINDINGS = {
        "Up": InputEvent.UP,
        "Left": InputEvent.LEFT,
        "Down": InputEvent.DOWN,
        "Right": InputEvent.RIGHT,
        "Return": InputEvent.SELECT,
        "Escape": InputEvent.CANCEL,
    }

    # ==================== PUSH BUTTONS ====================
    # Button number -> event
    BUTTON_BINDINGS = {
        0: InputEvent.DOWN,
        1: InputEvent.UP,
        2: InputEvent.RIGHT,
        3: InputEvent.LEFT,
    }

    # ==================== EVENT LOOP ====================
    # How often the UI polls for input and advances the clock (milliseconds)
    LOOP_INTERVAL_MS = 20
