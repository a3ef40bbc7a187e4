from __future__ import annotations

import logging
from typing import Any, List

from esper import World

from queens.components.board import Board
from queens.components.cell import Cell, CellState, QueenKind
from queens.components.history import HistoryEntry
from queens.errors import InvalidStateTransitionError, OutOfBoundsError
from queens.events.bus import (
    EVENT_CELL_CLICK,
    EVENT_CELL_DRAG,
    EVENT_CELLS_CHANGED,
    EVENT_QUEEN_PLACED,
    EVENT_QUEEN_REMOVED,
    EventBus,
)
from queens.systems.board_ops import (
    CellChange,
    cell_at,
    get_board,
    queens_on_board,
    snapshot_cells,
)
from queens.systems.conflict import conflicts
from queens.systems.history_system import HistorySystem
from queens.systems.propagation import (
    mark_surroundings,
    reset_surroundings,
    threatened_empty_cells,
)

logger = logging.getLogger(__name__)


class PlacementSystem:
    """Drives the per-cell cycle Empty -> Marked -> Queen -> Empty.

    Each committed transition snapshots every cell it is about to touch,
    pushes that snapshot onto the history, and publishes the changed cells
    as one ``EVENT_CELLS_CHANGED`` batch.
    """

    def __init__(self, world: World, event_bus: EventBus, history: HistorySystem):
        self.world = world
        self.event_bus = event_bus
        self.history = history
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)
        self.event_bus.subscribe(EVENT_CELL_DRAG, self.on_cell_drag)

    def on_cell_click(self, sender: Any, **kwargs: Any) -> None:
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        try:
            self.activate_cell(row, col)
        except OutOfBoundsError as exc:
            logger.warning("Ignoring cell click: %s", exc)

    def on_cell_drag(self, sender: Any, **kwargs: Any) -> None:
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        try:
            self.mark_cell(row, col)
        except OutOfBoundsError as exc:
            logger.warning("Ignoring cell drag: %s", exc)

    def activate_cell(self, row: int, col: int) -> List[CellChange]:
        """Advance one cell through its cycle; raises OutOfBoundsError before mutating anything."""
        board = get_board(self.world)
        cell = cell_at(self.world, board, row, col)
        state = cell.state
        if state is CellState.EMPTY:
            changes = self._mark(board, cell, "Mark")
        elif state is CellState.MARKED:
            changes = self._place_queen(board, cell)
        elif state is CellState.QUEEN_VALID:
            changes = self._remove_valid_queen(board, cell)
        elif state is CellState.QUEEN_CONFLICTING:
            changes = self._remove_conflicting_queen(board, cell)
        else:
            raise InvalidStateTransitionError(f"Cell {cell.coord} is in unknown state {state!r}")
        logger.debug("Cell (%d, %d): %s -> %s", row, col, state.value, changes[0][1].value if changes else state.value)
        self._publish(changes, reason="activate")
        return changes

    def mark_cell(self, row: int, col: int) -> List[CellChange]:
        """Drag helper: Empty -> Marked only; any other state is left alone."""
        board = get_board(self.world)
        cell = cell_at(self.world, board, row, col)
        if cell.state is not CellState.EMPTY:
            return []
        changes = self._mark(board, cell, "Drag-mark")
        self._publish(changes, reason="drag")
        return changes

    def _mark(self, board: Board, cell: Cell, verb: str) -> List[CellChange]:
        entry = HistoryEntry(
            coord=cell.coord,
            snapshots=snapshot_cells(self.world, board, [cell.index]),
            description=f"{verb} {cell.coord}",
        )
        cell.state = CellState.MARKED
        self.history.record(entry)
        return [(cell.coord, CellState.MARKED)]

    def _place_queen(self, board: Board, cell: Cell) -> List[CellChange]:
        kind = QueenKind.CONFLICTING if conflicts(cell, queens_on_board(self.world, board)) else QueenKind.VALID
        targets = threatened_empty_cells(self.world, board, cell) if kind is QueenKind.VALID else []
        entry = HistoryEntry(
            coord=cell.coord,
            snapshots=snapshot_cells(self.world, board, [cell.index] + [target.index for target in targets]),
            description=f"Place {kind.name.lower()} queen {cell.coord}",
        )
        cell.state = CellState.queen(kind)
        changes: List[CellChange] = [(cell.coord, cell.state)]
        if kind is QueenKind.VALID:
            changes.extend(mark_surroundings(self.world, board, cell, targets))
        self.history.record(entry)
        linked = [board.coord_of(index) for index in sorted(cell.linked)]
        self.event_bus.emit(EVENT_QUEEN_PLACED, row=cell.row, col=cell.col, kind=kind, linked=linked)
        return changes

    def _remove_valid_queen(self, board: Board, cell: Cell) -> List[CellChange]:
        released = sorted(cell.linked)
        entry = HistoryEntry(
            coord=cell.coord,
            snapshots=snapshot_cells(self.world, board, [cell.index] + released),
            description=f"Remove valid queen {cell.coord}",
        )
        changes = reset_surroundings(self.world, board, cell)
        # Activated cell first so callers can read the new state at changes[0].
        changes.sort(key=lambda change: change[0] != cell.coord)
        self.history.record(entry)
        self.event_bus.emit(
            EVENT_QUEEN_REMOVED,
            row=cell.row,
            col=cell.col,
            kind=QueenKind.VALID,
            released=[board.coord_of(index) for index in released],
        )
        return changes

    def _remove_conflicting_queen(self, board: Board, cell: Cell) -> List[CellChange]:
        entry = HistoryEntry(
            coord=cell.coord,
            snapshots=snapshot_cells(self.world, board, [cell.index]),
            description=f"Remove conflicting queen {cell.coord}",
        )
        cell.state = CellState.EMPTY
        cell.linked.clear()
        self.history.record(entry)
        self.event_bus.emit(
            EVENT_QUEEN_REMOVED, row=cell.row, col=cell.col, kind=QueenKind.CONFLICTING, released=[]
        )
        return [(cell.coord, CellState.EMPTY)]

    def _publish(self, changes: List[CellChange], *, reason: str) -> None:
        if changes:
            self.event_bus.emit(EVENT_CELLS_CHANGED, changes=changes, reason=reason)
