"""Outbound, advisory game events. Listeners are never awaited or acknowledged."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)


class GameEvent(Enum):
    TILE_ROTATED = "tile_rotated"
    BOARD_SHIFTED = "board_shifted"
    PLAYER_MOVED = "player_moved"
    TREASURE_COLLECTED = "treasure_collected"
    WIN_CONDITION_REACHED = "win_condition_reached"
    TURN_ADVANCED = "turn_advanced"

    # Rejections
    REVERSAL_REJECTED = "reversal_rejected"
    INVALID_LINE_REJECTED = "invalid_line_rejected"


@dataclass
class EventContext:
    event: GameEvent
    message: str = ""
    data: Dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> Dict[str, Any]:
        return {"event": self.event.value, "message": self.message, "data": dict(self.data)}


Listener = Callable[[EventContext], None]


class EventBus:
    """Synchronous fan-out of events to subscribed listeners."""

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, event: GameEvent, message: str = "", **data: Any) -> EventContext:
        ctx = EventContext(event=event, message=message, data=data)
        for listener in list(self._listeners):
            try:
                listener(ctx)
            except Exception:
                # The mutation has already happened; a listener cannot undo it.
                logger.exception("Listener %r failed on %s", listener, event.value)
        return ctx
