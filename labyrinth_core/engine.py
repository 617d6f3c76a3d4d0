from __future__ import annotations

import logging
from typing import Callable, FrozenSet, Optional

from .board import Coord, in_bounds
from .errors import (
    IllegalReversal,
    IllegalRotation,
    InvalidLine,
    OutOfBounds,
    UnreachableCell,
    WrongPhase,
)
from .events import EventBus, GameEvent
from .moves import reachable_from
from .shift import shift_board, side_from_name
from .state import GameState, Phase, ShiftRecord
from .tiles import DIRECTION_NAMES, Tile, rotate_clockwise

logger = logging.getLogger(__name__)

TurnPolicy = Callable[[GameState], int]


def round_robin(state: GameState) -> int:
    """Next player in seat order; a solo game stays on player 0."""
    return (state.current_player_index + 1) % len(state.players)


def stay_on_turn(state: GameState) -> int:
    return state.current_player_index


class LabyrinthGame:
    """
    Controller owning one GameState. Every command validates first and mutates
    only when all checks pass, so a raised LabyrinthError leaves state untouched.
    """

    def __init__(
        self,
        state: GameState,
        advance_turn: TurnPolicy = round_robin,
        events: Optional[EventBus] = None,
    ) -> None:
        self.state = state
        self.advance_turn = advance_turn
        self.events = events or EventBus()

    # ---- queries ----

    @property
    def phase(self) -> Phase:
        return self.state.phase

    def reachable(self) -> FrozenSet[Coord]:
        p = self.state.current_player
        return reachable_from(self.state.board, p.x, p.y)

    def is_won(self) -> bool:
        return self.state.winner is not None

    # ---- commands ----

    def rotate(self, tile: Tile) -> None:
        if tile is not self.state.board.extra_tile():
            logger.info('Rotation rejected: tile %s is on the board', tile.id)
            raise IllegalRotation('Only the extra tile can be rotated')
        self.rotate_extra_tile()

    def rotate_extra_tile(self) -> None:
        if self.state.phase is not Phase.SHIFT:
            logger.info('Rotation rejected during %s phase', self.state.phase.value)
            raise WrongPhase('The extra tile can only be rotated before shifting')
        tile = self.state.board.extra_tile()
        rotate_clockwise(tile)
        self.events.emit(GameEvent.TILE_ROTATED, rotation=tile.rotation)

    def shift(self, side, index: int) -> ShiftRecord:
        try:
            side = side_from_name(side)
            record = shift_board(self.state, side, index)
        except IllegalReversal as e:
            logger.info('Shift rejected: %s', e)
            self.events.emit(GameEvent.REVERSAL_REJECTED, str(e), side=side, index=index)
            raise
        except InvalidLine as e:
            logger.info('Shift rejected: %s', e)
            self.events.emit(GameEvent.INVALID_LINE_REJECTED, str(e), index=index)
            raise
        except WrongPhase as e:
            logger.info('Shift rejected: %s', e)
            raise
        self.events.emit(
            GameEvent.BOARD_SHIFTED,
            side=DIRECTION_NAMES[record.side],
            index=record.index,
        )
        return record

    def attempt_move(self, x: int, y: int) -> None:
        state = self.state
        if state.phase is not Phase.MOVE:
            logger.info('Move rejected during %s phase', state.phase.value)
            raise WrongPhase('Shift the board before moving')
        if not in_bounds(x, y):
            logger.info('Move to (%d, %d) rejected: off the board', x, y)
            raise OutOfBounds(x, y)
        player = state.current_player
        if (x, y) not in reachable_from(state.board, player.x, player.y):
            logger.info('Move of player %d to (%d, %d) rejected: unreachable', player.id, x, y)
            raise UnreachableCell(f'({x}, {y}) is not reachable from ({player.x}, {player.y})')

        player.x, player.y = x, y
        self.events.emit(GameEvent.PLAYER_MOVED, player=player.id, x=x, y=y)

        tile = state.board.tile_at(x, y)
        if tile.treasure:
            treasure, tile.treasure = tile.treasure, None
            player.score += 1
            logger.debug('Player %d collected %s', player.id, treasure)
            self.events.emit(
                GameEvent.TREASURE_COLLECTED,
                f'Collected {treasure}!',
                player=player.id,
                treasure=treasure,
                score=player.score,
            )
            if player.score == state.total_treasures and state.winner is None:
                state.winner = player.id
                self.events.emit(
                    GameEvent.WIN_CONDITION_REACHED,
                    'All treasure found, you win!',
                    player=player.id,
                )

        state.phase = Phase.SHIFT
        nxt = self.advance_turn(state)
        if nxt != state.current_player_index:
            state.current_player_index = nxt
            self.events.emit(GameEvent.TURN_ADVANCED, player=state.current_player.id)
