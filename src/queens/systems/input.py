from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

from queens.constants import GRID_SIZE
from queens.events.bus import (
    EVENT_CELL_CLICK,
    EVENT_CELL_DRAG,
    EVENT_MOUSE_DRAG,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_UNDO_REQUEST,
    EventBus,
)
from queens.ui.layout import cell_at_point, undo_button_hit

logger = logging.getLogger(__name__)

# arcade.MOUSE_BUTTON_LEFT; kept local so this module never imports arcade.
MOUSE_BUTTON_LEFT = 1
# arcade.key.U / arcade.key.BACKSPACE
KEY_U = 117
KEY_BACKSPACE = 65288


class InputSystem:
    """Maps pointer and keyboard input onto board events.

    A left press on a cell becomes ``EVENT_CELL_CLICK``; dragging with the
    left button held emits ``EVENT_CELL_DRAG`` once per newly entered cell
    (the pressed cell is skipped since the click already handled it).
    """

    def __init__(self, event_bus: EventBus, window, size: int = GRID_SIZE):
        self.event_bus = event_bus
        self.window = window
        self.size = size
        self._dragging = False
        self._last_drag_cell: Optional[Tuple[int, int]] = None
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_DRAG, self.on_mouse_drag)
        self.event_bus.subscribe(EVENT_MOUSE_RELEASE, self.on_mouse_release)

    def on_mouse_press(self, sender: Any, **kwargs: Any) -> None:
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None or button != MOUSE_BUTTON_LEFT:
            return
        if undo_button_hit(x, y):
            self.event_bus.emit(EVENT_UNDO_REQUEST, source="button")
            return
        cell = self._cell_at(x, y)
        if cell is None:
            return
        self._dragging = True
        self._last_drag_cell = cell
        self.event_bus.emit(EVENT_CELL_CLICK, row=cell[0], col=cell[1])

    def on_mouse_drag(self, sender: Any, **kwargs: Any) -> None:
        if not self._dragging:
            return
        buttons = kwargs.get('buttons', MOUSE_BUTTON_LEFT)
        if not (buttons & MOUSE_BUTTON_LEFT):
            return
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        cell = self._cell_at(x, y)
        if cell is None or cell == self._last_drag_cell:
            return
        self._last_drag_cell = cell
        self.event_bus.emit(EVENT_CELL_DRAG, row=cell[0], col=cell[1])

    def on_mouse_release(self, sender: Any, **kwargs: Any) -> None:
        self._dragging = False
        self._last_drag_cell = None

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> None:
        if symbol in (KEY_U, KEY_BACKSPACE):
            self.event_bus.emit(EVENT_UNDO_REQUEST, source="key")

    def _cell_at(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        return cell_at_point(x, y, self.window.width, self.window.height, self.size)
