"""
Controls module for Teeko.
Handles key presses and push buttons.
"""

from .events import InputEvent
from .config import ControlsConfig
from .input_source import InputPoll, InputSource
