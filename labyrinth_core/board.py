from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .errors import OutOfBounds
from .tiles import Tile, tile_glyph

BOARD_SIZE = 7
Coord = Tuple[int, int]  # (x, y); x is the column, y the row


def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


@dataclass(eq=False)
class Board:
    """The 7x7 tile grid plus the single extra tile held off the board."""
    grid: List[List[Tile]]  # row-major: grid[y][x]
    extra: Tile

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Tile]], extra: Tile) -> 'Board':
        """Builds a board from BOARD_SIZE rows of BOARD_SIZE tiles."""
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError(f'Expected a {BOARD_SIZE}x{BOARD_SIZE} grid of tiles')
        return cls(grid=[list(r) for r in rows], extra=extra)

    def _check(self, x: int, y: int) -> None:
        if not in_bounds(x, y):
            raise OutOfBounds(x, y)

    def tile_at(self, x: int, y: int) -> Tile:
        self._check(x, y)
        return self.grid[y][x]

    def set_tile_at(self, x: int, y: int, tile: Tile) -> None:
        self._check(x, y)
        self.grid[y][x] = tile

    def extra_tile(self) -> Tile:
        return self.extra

    def set_extra_tile(self, tile: Tile) -> None:
        self.extra = tile

    def coords(self) -> Iterable[Coord]:
        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                yield (x, y)

    def tiles(self) -> Iterator[Tile]:
        """Every tile in the game: the grid in row-major order, then the extra tile."""
        for row in self.grid:
            yield from row
        yield self.extra

    def rows(self) -> Tuple[Tuple[Tile, ...], ...]:
        return tuple(tuple(row) for row in self.grid)

    def pretty(self, players: Optional[Sequence] = None) -> str:
        """Text rendering: path glyphs, '$' for treasure, player tokens on top."""
        tokens = {}
        for p in players or ():
            tokens.setdefault((p.x, p.y), p.token)
        lines: List[str] = []
        for y in range(BOARD_SIZE):
            row: List[str] = []
            for x in range(BOARD_SIZE):
                tile = self.grid[y][x]
                if (x, y) in tokens:
                    mark = tokens[(x, y)]
                elif tile.treasure:
                    mark = '$'
                else:
                    mark = ' '
                row.append(tile_glyph(tile) + mark)
            lines.append(' '.join(row))
        return '\n'.join(lines)
