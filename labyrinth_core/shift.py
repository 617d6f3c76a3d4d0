from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from .board import BOARD_SIZE, Board
from .errors import IllegalReversal, InvalidLine, WrongPhase
from .state import GameState, Phase, ShiftRecord
from .tiles import DIRECTION_NAMES, DIRECTIONS, DX, DY, N, E, S, W, opposite

logger = logging.getLogger(__name__)

# Odd rows/columns slide; even ones hold the fixed tiles.
SHIFTABLE_LINES: Tuple[int, ...] = tuple(range(1, BOARD_SIZE, 2))

# Tiles enter from `side` and travel the opposite way.
PUSH_DIRECTION = {N: S, E: W, S: N, W: E}


def side_from_name(name) -> int:
    """Accepts 'N'/'E'/'S'/'W' (any case) or a direction index 0-3."""
    if isinstance(name, str) and name.strip().upper() in DIRECTION_NAMES:
        return DIRECTION_NAMES.index(name.strip().upper())
    try:
        side = int(name)
    except (TypeError, ValueError):
        raise InvalidLine(f'Unknown side: {name!r}') from None
    if side not in DIRECTIONS:
        raise InvalidLine(f'Unknown side: {name!r}')
    return side


def line_cells(side: int, index: int) -> List[Tuple[int, int]]:
    """Cells of the shifted line ordered from the entry edge to the exit edge."""
    last = BOARD_SIZE - 1
    steps = range(BOARD_SIZE)
    if side == N:
        return [(index, i) for i in steps]
    if side == S:
        return [(index, last - i) for i in steps]
    if side == W:
        return [(i, index) for i in steps]
    return [(last - i, index) for i in steps]


def is_reversal(last: ShiftRecord | None, side: int, index: int) -> bool:
    return last is not None and side == opposite(last.side) and index == last.index


def validate_shift(state: GameState, side: int, index: int) -> None:
    """Raises the matching error when the shift may not be performed."""
    if state.phase is not Phase.SHIFT:
        raise WrongPhase(f'Cannot shift during {state.phase.value} phase')
    if side not in DIRECTIONS:
        raise InvalidLine(f'Unknown side: {side!r}')
    if index not in SHIFTABLE_LINES:
        raise InvalidLine(f'Line {index} cannot be shifted; choose one of {list(SHIFTABLE_LINES)}')
    if is_reversal(state.last_shift, side, index):
        raise IllegalReversal('Cannot reverse the previous move immediately!')


def slide_line(board: Board, side: int, index: int) -> None:
    """Pushes the extra tile in at the entry edge; the exit tile becomes the extra tile."""
    cells = line_cells(side, index)
    ejected = board.tile_at(*cells[-1])
    for i in range(len(cells) - 1, 0, -1):
        board.set_tile_at(*cells[i], board.tile_at(*cells[i - 1]))
    board.set_tile_at(*cells[0], board.extra_tile())
    board.set_extra_tile(ejected)


def carry_players(players: Iterable, side: int, index: int) -> None:
    """Players on the line ride along, wrapping from the exit edge to the entry edge."""
    d = PUSH_DIRECTION[side]
    vertical = side in (N, S)
    for p in players:
        on_line = p.x == index if vertical else p.y == index
        if on_line:
            p.x = (p.x + DX[d]) % BOARD_SIZE
            p.y = (p.y + DY[d]) % BOARD_SIZE


def shift_board(state: GameState, side: int, index: int) -> ShiftRecord:
    """Validates then applies a shift; on error nothing is mutated."""
    validate_shift(state, side, index)
    slide_line(state.board, side, index)
    carry_players(state.players, side, index)
    record = ShiftRecord(side=side, index=index)
    state.last_shift = record
    state.phase = Phase.MOVE
    logger.debug('Shifted line %d from %s', index, DIRECTION_NAMES[side])
    return record
