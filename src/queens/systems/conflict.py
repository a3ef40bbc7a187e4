"""Row, column and king-move adjacency rule shared by conflict checks and propagation."""
from __future__ import annotations

from typing import Iterable

from queens.components.cell import Cell


def threatens(row: int, col: int, other_row: int, other_col: int) -> bool:
    """True when two squares share a row, a column, or touch (Chebyshev distance <= 1)."""
    if row == other_row or col == other_col:
        return True
    return abs(row - other_row) <= 1 and abs(col - other_col) <= 1


def conflicts(candidate: Cell, existing_queens: Iterable[Cell]) -> bool:
    """Check a prospective queen against the queens already on the board.

    Must run before ``candidate`` itself becomes a queen.
    """
    return any(
        threatens(candidate.row, candidate.col, queen.row, queen.col)
        for queen in existing_queens
    )
