from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence, Tuple

from .board import BOARD_SIZE, Board, Coord
from .shift import SHIFTABLE_LINES
from .state import GameState, Player
from .tiles import Tile, TileType

I, L, T = TileType.STRAIGHT, TileType.CORNER, TileType.TEE

# (x, y) -> (type, rotation) for the tiles that never move.
FIXED_LAYOUT: Dict[Coord, Tuple[TileType, int]] = {
    (0, 0): (L, 1), (6, 0): (L, 2), (0, 6): (L, 0), (6, 6): (L, 3),
    (2, 0): (T, 2), (4, 0): (T, 2),
    (0, 2): (T, 1), (2, 2): (T, 1), (4, 2): (T, 3), (6, 2): (T, 3),
    (0, 4): (T, 1), (2, 4): (T, 0), (4, 4): (T, 3), (6, 4): (T, 3),
    (2, 6): (T, 0), (4, 6): (T, 0),
}

DECK_COMPOSITION: Sequence[Tuple[TileType, int]] = ((I, 12), (L, 16), (T, 6))

TREASURES: Tuple[str, ...] = (
    'crown', 'ring', 'orb', 'urn', 'scroll', 'dagger',
    'shield', 'key', 'candle', 'vase', 'gem', 'trophy',
)

# Never hold a treasure, whatever the player count.
TREASURE_FREE_CELLS: Tuple[Coord, ...] = ((0, 0), (6, 6))

START_CORNERS: Tuple[Coord, ...] = ((0, 0), (6, 6), (6, 0), (0, 6))
PLAYER_COLORS: Tuple[str, ...] = ('#ffffff', '#e74c3c', '#3498db', '#2ecc71')
MAX_PLAYERS = len(START_CORNERS)

_ID_ALPHABET = '0123456789abcdefghijklmnopqrstuvwxyz'


def _tile_id(rng: random.Random) -> str:
    return ''.join(rng.choice(_ID_ALPHABET) for _ in range(9))


def validate_layout(board: Board) -> None:
    """Fixed tiles must sit off every shiftable row and column."""
    for x, y in board.coords():
        if board.tile_at(x, y).fixed and (x in SHIFTABLE_LINES or y in SHIFTABLE_LINES):
            raise ValueError(f'Fixed tile at ({x}, {y}) lies on a shiftable line')
    if board.extra_tile().fixed:
        raise ValueError('The extra tile cannot be fixed')


def deal_board(rng: random.Random) -> Board:
    """Places the fixed layout, then fills the free cells from a shuffled deck."""
    deck: List[TileType] = []
    for kind, count in DECK_COMPOSITION:
        deck.extend([kind] * count)
    rng.shuffle(deck)

    free_cells = BOARD_SIZE * BOARD_SIZE - len(FIXED_LAYOUT)
    if len(deck) != free_cells + 1:
        raise ValueError(f'Invalid deck: expected {free_cells + 1} tiles, got {len(deck)}')

    rows: List[List[Tile]] = []
    cards = iter(deck)
    for y in range(BOARD_SIZE):
        row: List[Tile] = []
        for x in range(BOARD_SIZE):
            if (x, y) in FIXED_LAYOUT:
                kind, rot = FIXED_LAYOUT[(x, y)]
                row.append(Tile(kind, rot, fixed=True, id=_tile_id(rng)))
            else:
                row.append(Tile(next(cards), rng.randrange(4), id=_tile_id(rng)))
        rows.append(row)
    extra = Tile(next(cards), rng.randrange(4), id=_tile_id(rng))
    board = Board.from_rows(rows, extra)
    validate_layout(board)
    return board


def place_treasures(board: Board, rng: random.Random, excluded: Sequence[Coord] = ()) -> int:
    """Spreads TREASURES over random tiles (the extra tile included). Returns how many were placed."""
    skip = set(TREASURE_FREE_CELLS) | set(excluded)
    candidates = [board.tile_at(x, y) for x, y in board.coords() if (x, y) not in skip]
    candidates.append(board.extra_tile())
    rng.shuffle(candidates)
    placed = 0
    for symbol, tile in zip(TREASURES, candidates):
        tile.treasure = symbol
        placed += 1
    return placed


def make_players(num_players: int) -> List[Player]:
    if not 1 <= num_players <= MAX_PLAYERS:
        raise ValueError(f'Player count must be between 1 and {MAX_PLAYERS}')
    return [
        Player(id=i, x=START_CORNERS[i][0], y=START_CORNERS[i][1], token=str(i + 1), color=PLAYER_COLORS[i])
        for i in range(num_players)
    ]


def new_game(seed: Optional[int] = None, num_players: int = 1, rng: Optional[random.Random] = None) -> GameState:
    """Deals a fresh game. Pass `rng` (or `seed`) for a reproducible layout."""
    rng = rng or random.Random(seed)
    players = make_players(num_players)
    board = deal_board(rng)
    total = place_treasures(board, rng, excluded=[(p.x, p.y) for p in players])
    return GameState(board=board, players=players, total_treasures=total)
