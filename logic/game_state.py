"""
Turn state for Teeko.
Tracks the current phase, whose turn it is, and piece counts.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from .board import Player


class Phase(Enum):
    """
    The phases of a turn.

    DROP: players take turns putting new pieces on the board.
    PICK_UP: the active player lifts one of their own pieces.
    PUT_DOWN: the lifted piece goes onto a neighbouring empty cell.
    """
    DROP = 1
    PICK_UP = 2
    PUT_DOWN = 3


@dataclass(frozen=True)
class PhaseChanged:
    phase: Phase


@dataclass(frozen=True)
class PlayerChanged:
    player: Player


@dataclass(frozen=True)
class GameOver:
    winner: Player


@dataclass(frozen=True)
class PauseChanged:
    paused: bool


Notification = Union[PhaseChanged, PlayerChanged, GameOver, PauseChanged]


@dataclass
class TurnState:
    """
    Where we are in the game.

    pieces_placed counts each player's pieces currently on the board:
    lifting a piece lowers it by one until the piece is put down again.
    picked_up_from is only set during PUT_DOWN.
    """
    active_player: Player = Player.A
    phase: Phase = Phase.DROP
    pieces_placed: Dict[Player, int] = field(
        default_factory=lambda: {Player.A: 0, Player.B: 0}
    )
    picked_up_from: Optional[Tuple[int, int]] = None

    def pieces_of(self, player: Player) -> int:
        return self.pieces_placed[player]

    def switch_player(self) -> Player:
        """Hand the turn to the other player."""
        self.active_player = self.active_player.opposite()
        return self.active_player

    def copy(self) -> "TurnState":
        return TurnState(
            active_player=self.active_player,
            phase=self.phase,
            pieces_placed=dict(self.pieces_placed),
            picked_up_from=self.picked_up_from,
        )
