"""
Input source for Teeko.
Turns key presses and button pushes into discrete game events.
"""

from collections import deque
from dataclasses import dataclass
from typing import Optional

from .config import ControlsConfig
from .events import InputEvent


@dataclass(frozen=True)
class InputPoll:
    """
    What one loop iteration gets from the input source.

    The directional event, when present, was pressed before the action.
    """
    directional: Optional[InputEvent] = None
    action: Optional[InputEvent] = None

    @property
    def is_empty(self) -> bool:
        return self.directional is None and self.action is None


class InputSource:
    """
    Buffers player input until the game loop asks for it.

    Events wait in one queue in the order they were pressed. Each poll
    hands out at most one directional event followed by at most one
    action (select / pause / cancel), never reordering them.
    """

    def __init__(self, config: Optional[ControlsConfig] = None):
        """
        Initialize the input source.

        Args:
            config: Controls configuration.
        """
        self.config = config or ControlsConfig()
        self._events = deque()

    def push(self, event: InputEvent):
        self._events.append(event)

    def feed_key(self, key: str) -> bool:
        """
        Queue the event for a key.

        Args:
            key: A single character or a Tkinter key name.

        Returns:
            True if the key is bound, False if it was ignored.
        """
        event = self.config.KEYSYM_BINDINGS.get(key)
        if event is None and len(key) == 1:
            event = self.config.KEY_BINDINGS.get(key.lower())
        if event is None:
            return False
        self.push(event)
        return True

    def feed_text(self, text: str) -> int:
        """Queue every bound character in text. Returns how many were bound."""
        return sum(1 for char in text if self.feed_key(char))

    def feed_button(self, button: int) -> bool:
        """Queue the event for a push button. Unknown buttons are ignored."""
        event = self.config.BUTTON_BINDINGS.get(button)
        if event is None:
            return False
        self.push(event)
        return True

    def poll(self) -> InputPoll:
        """
        Take the next events in press order.

        Returns:
            A directional event and the action right after it, a lone
            directional event, a lone action, or nothing.
        """
        directional = None
        action = None

        if self._events and self._events[0].is_directional:
            directional = self._events.popleft()
        if self._events and not self._events[0].is_directional:
            action = self._events.popleft()

        return InputPoll(directional, action)

    def pending(self) -> bool:
        return bool(self._events)

    def clear(self):
        """Drop anything waiting (e.g. presses made during the start screen)."""
        self._events.clear()
