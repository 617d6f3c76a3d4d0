from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

Mask = Tuple[bool, bool, bool, bool]  # indexed by direction N, E, S, W

N, E, S, W = 0, 1, 2, 3
DIRECTIONS = (N, E, S, W)
DIRECTION_NAMES = ('N', 'E', 'S', 'W')
DX = (0, 1, 0, -1)
DY = (-1, 0, 1, 0)  # north is toward y == 0


def opposite(direction: int) -> int:
    return (direction + 2) % 4


class TileType(str, Enum):
    STRAIGHT = 'I'
    CORNER = 'L'
    TEE = 'T'


BASE_CONNECTIONS: Dict[TileType, Mask] = {
    TileType.STRAIGHT: (True, False, True, False),  # N-S
    TileType.CORNER: (True, True, False, False),    # N-E
    TileType.TEE: (True, True, False, True),        # N-E-W
}


@dataclass(eq=False)
class Tile:
    """A path tile. Identity matters: a tile is relocated by shifts, never copied."""
    type: TileType
    rotation: int = 0
    fixed: bool = False
    treasure: Optional[str] = None
    id: str = ''

    def __post_init__(self) -> None:
        self.type = TileType(self.type)
        self.rotation %= 4


def connections(tile: Tile) -> Mask:
    """Connectivity mask of the tile after applying its clockwise rotation."""
    base = BASE_CONNECTIONS[tile.type]
    rot = tile.rotation % 4
    return tuple(base[(d - rot) % 4] for d in DIRECTIONS)  # type: ignore[return-value]


def rotate_clockwise(tile: Tile) -> None:
    tile.rotation = (tile.rotation + 1) % 4


# Box-drawing glyph per mask, used by the text renderer.
_GLYPHS: Dict[Mask, str] = {
    (True, False, True, False): '│',
    (False, True, False, True): '─',
    (True, True, False, False): '└',
    (False, True, True, False): '┌',
    (False, False, True, True): '┐',
    (True, False, False, True): '┘',
    (True, True, False, True): '┴',
    (True, True, True, False): '├',
    (False, True, True, True): '┬',
    (True, False, True, True): '┤',
}


def tile_glyph(tile: Tile) -> str:
    return _GLYPHS.get(connections(tile), '?')
