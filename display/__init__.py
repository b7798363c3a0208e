"""
Display module for Teeko.
Handles the LED matrix and the terminal status lines.
"""

from .config import DisplayConfig
from .led_matrix import LedMatrix
from .terminal import StatusPrinter
