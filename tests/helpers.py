from __future__ import annotations

from queens.components.cell import CellState
from queens.session import PuzzleSession


def board_snapshot(session: PuzzleSession) -> dict:
    """State and links of every cell, for whole-board equality checks."""
    size = session.size
    return {
        (row, col): (session.state_of(row, col), tuple(session.linked_cells_of(row, col)))
        for row in range(size)
        for col in range(size)
    }


def place_queen(session: PuzzleSession, row: int, col: int) -> list:
    """Activate an empty cell twice (mark, then queen); returns the second batch."""
    assert session.state_of(row, col) is CellState.EMPTY
    session.activate_cell(row, col)
    return session.activate_cell(row, col)


def coords_in_state(session: PuzzleSession, state: CellState) -> set:
    size = session.size
    return {
        (row, col)
        for row in range(size)
        for col in range(size)
        if session.state_of(row, col) is state
    }
