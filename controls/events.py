"""
Input events for Teeko.
The discrete things a player can do.
"""

from enum import Enum
from typing import Tuple


class InputEvent(Enum):
    """Everything a player can do."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SELECT = "select"
    PAUSE = "pause"
    CANCEL = "cancel"

    @property
    def is_directional(self) -> bool:
        return self in _DELTAS

    @property
    def delta(self) -> Tuple[int, int]:
        """(dx, dy) cursor movement. Up is +y."""
        return _DELTAS.get(self, (0, 0))


_DELTAS = {
    InputEvent.UP: (0, 1),
    InputEvent.DOWN: (0, -1),
    InputEvent.LEFT: (-1, 0),
    InputEvent.RIGHT: (1, 0),
}
