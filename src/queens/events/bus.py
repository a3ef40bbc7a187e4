from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_MOUSE_DRAG = "mouse_drag"            # payload: x, y, buttons
EVENT_MOUSE_RELEASE = "mouse_release"      # payload: x, y, button
EVENT_CELL_CLICK = "cell_click"            # payload: row, col
EVENT_CELL_DRAG = "cell_drag"              # payload: row, col
EVENT_UNDO_REQUEST = "undo_request"        # payload: source=str


# ============================================================================
# BOARD STATE
# ============================================================================
EVENT_CELLS_CHANGED = "cells_changed"      # payload: changes=[((r,c), CellState),...], reason=str
EVENT_QUEEN_PLACED = "queen_placed"        # payload: row, col, kind=QueenKind, linked=[(r,c),...]
EVENT_QUEEN_REMOVED = "queen_removed"      # payload: row, col, kind=QueenKind, released=[(r,c),...]
EVENT_UNDO_APPLIED = "undo_applied"        # payload: row, col, changes=[((r,c), CellState),...], remaining=int
