from __future__ import annotations

# Facade module that re-exports Labyrinth core functionality.
# Used by the Flask app and tests; single-responsibility modules live under labyrinth_core/*.

from labyrinth_core.board import BOARD_SIZE, Board, Coord, in_bounds
from labyrinth_core.deal import (
    FIXED_LAYOUT,
    MAX_PLAYERS,
    START_CORNERS,
    TREASURES,
    deal_board,
    make_players,
    new_game,
    place_treasures,
    validate_layout,
)
from labyrinth_core.engine import LabyrinthGame, round_robin, stay_on_turn
from labyrinth_core.errors import (
    IllegalReversal,
    IllegalRotation,
    InvalidLine,
    LabyrinthError,
    OutOfBounds,
    UnreachableCell,
    WrongPhase,
)
from labyrinth_core.events import EventBus, EventContext, GameEvent
from labyrinth_core.moves import can_move, find_path, neighbors, reachable_from
from labyrinth_core.shift import SHIFTABLE_LINES, line_cells, shift_board, side_from_name
from labyrinth_core.state import GameState, Phase, Player, ShiftRecord
from labyrinth_core.tiles import (
    DIRECTION_NAMES,
    E,
    N,
    S,
    W,
    Tile,
    TileType,
    connections,
    opposite,
    rotate_clockwise,
    tile_glyph,
)


def main() -> None:
    # CLI driver delegated to labyrinth_core.cli
    from labyrinth_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
