from __future__ import annotations

import logging
from typing import Iterable, List

from esper import World

from queens.components.board import Board
from queens.components.cell import Cell, CellState
from queens.systems.board_ops import CellChange, cell_by_index, iter_cells
from queens.systems.conflict import threatens

logger = logging.getLogger(__name__)


def threatened_empty_cells(world: World, board: Board, queen: Cell) -> List[Cell]:
    """Empty cells in the queen's row, column or 8-neighborhood (never the queen's own cell)."""
    return [
        cell
        for cell in iter_cells(world, board)
        if cell.index != queen.index
        and cell.state is CellState.EMPTY
        and threatens(queen.row, queen.col, cell.row, cell.col)
    ]


def mark_surroundings(
    world: World,
    board: Board,
    queen: Cell,
    targets: Iterable[Cell] | None = None,
) -> List[CellChange]:
    """Mark every threatened empty cell and link it to ``queen``.

    ``targets`` lets the caller pass a scan it already made; a neighborhood
    that is fully marked produces no changes.
    """
    if targets is None:
        targets = threatened_empty_cells(world, board, queen)
    changes: List[CellChange] = []
    for cell in targets:
        if cell.state is not CellState.EMPTY:
            continue
        cell.state = CellState.MARKED
        queen.linked.add(cell.index)
        changes.append((cell.coord, CellState.MARKED))
    logger.debug("Queen at %s marked %d cell(s)", queen.coord, len(changes))
    return changes


def reset_surroundings(world: World, board: Board, queen: Cell) -> List[CellChange]:
    """Return every cell linked to ``queen`` to Empty, then clear the queen cell.

    Linked cells are emptied unconditionally, whatever happened to them since.
    """
    changes: List[CellChange] = []
    for index in sorted(queen.linked):
        cell = cell_by_index(world, board, index)
        if cell.state is not CellState.EMPTY:
            changes.append((cell.coord, CellState.EMPTY))
        cell.state = CellState.EMPTY
        cell.linked.clear()
    released = len(queen.linked)
    queen.linked.clear()
    if queen.state is not CellState.EMPTY:
        changes.append((queen.coord, CellState.EMPTY))
    queen.state = CellState.EMPTY
    logger.debug("Queen at %s removed, released %d linked cell(s)", queen.coord, released)
    return changes
