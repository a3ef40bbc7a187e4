from __future__ import annotations

from typing import Iterable, List, Tuple

from esper import World

from queens.components.board import Board
from queens.components.cell import Cell, CellState
from queens.components.history import CellSnapshot, UndoHistory
from queens.components.region import Region
from queens.errors import OutOfBoundsError

Position = Tuple[int, int]
CellChange = Tuple[Position, CellState]


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def get_history(world: World) -> UndoHistory:
    for _, history in world.get_component(UndoHistory):
        return history
    raise RuntimeError("UndoHistory not found")


def cell_entity_at(board: Board, row: int, col: int) -> int:
    if not board.in_bounds(row, col):
        raise OutOfBoundsError(row, col, board.size)
    return board.cells[board.index_of(row, col)]


def cell_at(world: World, board: Board, row: int, col: int) -> Cell:
    return world.component_for_entity(cell_entity_at(board, row, col), Cell)


def cell_by_index(world: World, board: Board, index: int) -> Cell:
    return world.component_for_entity(board.cells[index], Cell)


def iter_cells(world: World, board: Board) -> Iterable[Cell]:
    for entity in board.cells:
        yield world.component_for_entity(entity, Cell)


def cells_in_state(world: World, board: Board, *states: CellState) -> List[Cell]:
    return [cell for cell in iter_cells(world, board) if cell.state in states]


def queens_on_board(world: World, board: Board) -> List[Cell]:
    return [cell for cell in iter_cells(world, board) if cell.state.is_queen]


def get_region(world: World, region_id: int) -> Region:
    for _, region in world.get_component(Region):
        if region.region_id == region_id:
            return region
    raise KeyError(f"Region {region_id} not found")


def list_regions(world: World) -> List[Region]:
    return sorted((region for _, region in world.get_component(Region)), key=lambda r: r.region_id)


def snapshot_cells(world: World, board: Board, indexes: Iterable[int]) -> Tuple[CellSnapshot, ...]:
    """Capture state and links of each arena index, keeping first-seen order and dropping repeats."""
    seen: set[int] = set()
    snapshots: List[CellSnapshot] = []
    for index in indexes:
        if index in seen:
            continue
        seen.add(index)
        cell = cell_by_index(world, board, index)
        snapshots.append(CellSnapshot(index=index, state=cell.state, linked=frozenset(cell.linked)))
    return tuple(snapshots)


def restore_snapshots(world: World, board: Board, snapshots: Iterable[CellSnapshot]) -> List[CellChange]:
    """Write snapshots back verbatim; returns the cells whose state actually changed."""
    changes: List[CellChange] = []
    for snap in snapshots:
        cell = cell_by_index(world, board, snap.index)
        before = cell.state
        cell.state = snap.state
        cell.linked = set(snap.linked)
        if before is not snap.state:
            changes.append((cell.coord, snap.state))
    return changes
