from __future__ import annotations

from typing import Optional, Tuple

from queens.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOARD_TOP_MARGIN,
    CELL_SIZE,
    GRID_SIZE,
    MIN_CELL_SIZE,
    UNDO_BUTTON_RECT,
)


def compute_board_geometry(window_width: int, window_height: int, size: int = GRID_SIZE) -> Tuple[int, float, float]:
    """Return (cell_size, start_x, start_y) shared by rendering and input mapping.

    ``start_x``/``start_y`` is the lower-left corner of the board in window
    coordinates (arcade's y axis points up); row 0 is drawn at the top.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOARD_TOP_MARGIN) * BOARD_MAX_HEIGHT_PCT
    cell_size = int(min(CELL_SIZE, max_board_w / size, max_board_h / size))
    if cell_size < MIN_CELL_SIZE:
        cell_size = MIN_CELL_SIZE
    total = size * cell_size
    start_x = (window_width - total) / 2
    start_y = window_height - BOARD_TOP_MARGIN - total
    return cell_size, start_x, start_y


def cell_rect(row: int, col: int, cell_size: int, start_x: float, start_y: float, size: int = GRID_SIZE) -> Tuple[float, float, float, float]:
    """(left, right, bottom, top) of a cell."""
    left = start_x + col * cell_size
    bottom = start_y + (size - 1 - row) * cell_size
    return left, left + cell_size, bottom, bottom + cell_size


def cell_at_point(x: float, y: float, window_width: int, window_height: int, size: int = GRID_SIZE) -> Optional[Tuple[int, int]]:
    cell_size, start_x, start_y = compute_board_geometry(window_width, window_height, size)
    total = size * cell_size
    if x < start_x or x >= start_x + total:
        return None
    if y < start_y or y >= start_y + total:
        return None
    col = int((x - start_x) // cell_size)
    row = size - 1 - int((y - start_y) // cell_size)
    return row, col


def undo_button_hit(x: float, y: float) -> bool:
    left, bottom, width, height = UNDO_BUTTON_RECT
    return left <= x <= left + width and bottom <= y <= bottom + height
