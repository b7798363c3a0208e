"""
Logic module for Teeko.
Handles the board, cursor, turn phases and win detection.
"""

from .config import GameConfig
from .board import Board, CellState, Player
from .cursor import Cursor, CursorGlyph, RedrawCell, VisualState, normalize
from .game_state import (
    GameOver, Notification, PauseChanged, Phase, PhaseChanged, PlayerChanged, TurnState
)
from .move_validator import MoveOutcome, MoveValidator, Reason
from .phase_engine import PhaseEngine
from .win_checker import WinChecker
from .session import GameSession, SelectResult
