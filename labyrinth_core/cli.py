from __future__ import annotations

import argparse
import os

from .deal import MAX_PLAYERS, new_game
from .engine import LabyrinthGame
from .errors import LabyrinthError
from .events import EventContext
from .logging_config import setup_logging
from .moves import find_path
from .state import Phase
from .tiles import DIRECTION_NAMES, tile_glyph

HELP = """Commands:
  r            rotate the extra tile
  N|E|S|W i    shift line i (1, 3 or 5) with tiles entering from that side
  x,y          move to a reachable cell (after shifting)
  q            quit"""


def _print_event(ctx: EventContext) -> None:
    if ctx.message:
        print('*', ctx.message)


def _status(game: LabyrinthGame) -> str:
    s = game.state
    p = s.current_player
    extra = s.board.extra_tile()
    treasure = f' [{extra.treasure}]' if extra.treasure else ''
    return (f"Player {p.token} at ({p.x},{p.y})  score {p.score}/{s.total_treasures}  "
            f"phase {s.phase.value}  extra {tile_glyph(extra)}{treasure}")


def main() -> None:
    parser = argparse.ArgumentParser(description='Labyrinth tile-sliding maze in the terminal')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal')
    parser.add_argument('--players', type=int, default=int(os.getenv('LABYRINTH_PLAYERS', '1')),
                        choices=range(1, MAX_PLAYERS + 1), help='Number of players')
    parser.add_argument('--log-level', default=os.getenv('LABYRINTH_LOG_LEVEL', 'WARNING'))
    parser.add_argument('--show-paths', action='store_true', help='Show the route taken by each move')
    args = parser.parse_args()
    setup_logging(args.log_level)

    game = LabyrinthGame(new_game(seed=args.seed, num_players=args.players))
    game.events.subscribe(_print_event)
    print(HELP)

    while True:
        s = game.state
        print()
        print(s.board.pretty(s.players))
        print(_status(game))
        if s.phase is Phase.MOVE:
            print('Reachable:', sorted(game.reachable()))
        try:
            text = input('> ').strip()
        except EOFError:
            return
        if not text:
            continue
        if text.lower() == 'q':
            return
        try:
            if text.lower() == 'r':
                game.rotate_extra_tile()
            elif text[0].upper() in DIRECTION_NAMES:
                side, _, idx = text.partition(' ')
                game.shift(side, int(idx))
            else:
                sep = ',' if ',' in text else ' '
                x_s, y_s = [t for t in text.split(sep) if t != '']
                x, y = int(x_s), int(y_s)
                p = s.current_player
                path = find_path(s.board, (p.x, p.y), (x, y)) if args.show_paths else None
                game.attempt_move(x, y)
                if path is not None:
                    print('Path:', path)
        except LabyrinthError as e:
            print('Rejected:', e)
        except ValueError:
            print('Could not parse. Try again.')
