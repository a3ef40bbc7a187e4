from __future__ import annotations

from typing import Any, Dict, Tuple

import arcade

from queens.components.cell import CellState
from queens.constants import (
    BUTTON_TEXT_COLOR,
    CELL_GAP,
    CONFLICTING_QUEEN_COLOR,
    DEFAULT_CELL_COLOR,
    GRID_LINE_COLOR,
    MARKED_COLOR,
    UNDO_BUTTON_LABEL,
    UNDO_BUTTON_RECT,
    VALID_QUEEN_COLOR,
)
from queens.events.bus import EVENT_CELLS_CHANGED, EventBus
from queens.session import PuzzleSession
from queens.ui.layout import cell_rect, compute_board_geometry

Color = Tuple[int, int, int]


class RenderSystem:
    """Draws the board from a local state cache fed by ``EVENT_CELLS_CHANGED`` batches."""

    def __init__(self, session: PuzzleSession, event_bus: EventBus, window):
        self.session = session
        self.event_bus = event_bus
        self.window = window
        self.size = session.size
        self._states: Dict[Tuple[int, int], CellState] = {}
        self._base_colors: Dict[Tuple[int, int], Color] = {}
        for region in session.regions():
            for coord in region.cells:
                self._base_colors[coord] = region.color
        for row in range(self.size):
            for col in range(self.size):
                self._states[(row, col)] = session.state_of(row, col)
        self.event_bus.subscribe(EVENT_CELLS_CHANGED, self.on_cells_changed)

    def on_cells_changed(self, sender: Any, **kwargs: Any) -> None:
        for coord, state in kwargs.get('changes') or ():
            self._states[tuple(coord)] = state

    def fill_color(self, row: int, col: int) -> Color:
        if self._states.get((row, col)) is CellState.MARKED:
            return MARKED_COLOR
        return self._base_colors.get((row, col), DEFAULT_CELL_COLOR)

    def process(self):
        cell_size, start_x, start_y = compute_board_geometry(self.window.width, self.window.height, self.size)
        inset = CELL_GAP / 2
        for (row, col), state in self._states.items():
            left, right, bottom, top = cell_rect(row, col, cell_size, start_x, start_y, self.size)
            arcade.draw_lrbt_rectangle_filled(left + inset, right - inset, bottom + inset, top - inset, self.fill_color(row, col))
            arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, GRID_LINE_COLOR, 2)
            if state.is_queen:
                color = VALID_QUEEN_COLOR if state is CellState.QUEEN_VALID else CONFLICTING_QUEEN_COLOR
                cx = (left + right) / 2
                cy = (bottom + top) / 2
                arcade.draw_circle_filled(cx, cy, cell_size * 0.32, color)
                arcade.draw_text("Q", cx, cy, BUTTON_TEXT_COLOR, cell_size * 0.3, anchor_x="center", anchor_y="center", bold=True)
        left, bottom, width, height = UNDO_BUTTON_RECT
        arcade.draw_lbwh_rectangle_outline(left, bottom, width, height, BUTTON_TEXT_COLOR, 2)
        arcade.draw_text(
            UNDO_BUTTON_LABEL,
            left + width / 2,
            bottom + height / 2,
            BUTTON_TEXT_COLOR,
            20,
            anchor_x="center",
            anchor_y="center",
        )
