from __future__ import annotations

import logging
from typing import Any

from esper import World

from queens.components.history import HistoryEntry
from queens.events.bus import (
    EVENT_CELLS_CHANGED,
    EVENT_UNDO_APPLIED,
    EVENT_UNDO_REQUEST,
    EventBus,
)
from queens.systems.board_ops import get_board, get_history, restore_snapshots

logger = logging.getLogger(__name__)


class HistorySystem:
    """Owns the undo stack: records committed transitions and reverses them one at a time."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_UNDO_REQUEST, self.on_undo_request)

    @property
    def depth(self) -> int:
        return len(get_history(self.world))

    def record(self, entry: HistoryEntry) -> None:
        get_history(self.world).push(entry)
        logger.debug("Recorded %s", entry.description or entry.coord)

    def on_undo_request(self, sender: Any, **payload: Any) -> None:
        self.undo_last()

    def undo_last(self) -> bool:
        """Reverse the most recent transition; False (and no change) when nothing is recorded."""
        history = get_history(self.world)
        entry = history.pop()
        if entry is None:
            logger.debug("Undo requested with empty history")
            return False
        changes = restore_snapshots(self.world, get_board(self.world), entry.snapshots)
        logger.debug("Undid %s, %d cell(s) changed", entry.description or entry.coord, len(changes))
        if changes:
            self.event_bus.emit(EVENT_CELLS_CHANGED, changes=changes, reason="undo")
        row, col = entry.coord
        self.event_bus.emit(EVENT_UNDO_APPLIED, row=row, col=col, changes=changes, remaining=len(history))
        return True
