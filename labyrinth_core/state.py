from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .board import Board


class Phase(str, Enum):
    SHIFT = 'SHIFT'
    MOVE = 'MOVE'


@dataclass(frozen=True)
class ShiftRecord:
    side: int   # direction the tiles enter from: N, E, S or W
    index: int  # row or column that was shifted


@dataclass
class Player:
    id: int
    x: int
    y: int
    token: str
    color: str = '#ffffff'
    score: int = 0


@dataclass
class GameState:
    """Represents the dynamic state of the game: board, players, phase and turn."""
    board: Board
    players: List[Player]
    phase: Phase = Phase.SHIFT
    current_player_index: int = 0
    last_shift: Optional[ShiftRecord] = None
    total_treasures: int = 0
    winner: Optional[int] = None

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]
