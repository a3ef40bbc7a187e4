from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from esper import World

from queens.components.cell import CellState, QueenKind
from queens.components.region import Region
from queens.constants import GRID_SIZE
from queens.events.bus import EventBus
from queens.factories.regions import RegionSpec
from queens.systems.board_ops import (
    CellChange,
    cell_at,
    get_board,
    get_region,
    list_regions,
    queens_on_board,
)
from queens.systems.history_system import HistorySystem
from queens.systems.placement_system import PlacementSystem
from queens.world import create_world

logger = logging.getLogger(__name__)


class PuzzleSession:
    """One active puzzle: its own world, event bus, and the engine systems wired to them.

    Presentation and input adapters either call the methods below directly or
    emit the matching events on ``event_bus``.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.history_system = HistorySystem(world, event_bus)
        self.placement_system = PlacementSystem(world, event_bus, self.history_system)

    @property
    def size(self) -> int:
        return get_board(self.world).size

    def activate_cell(self, row: int, col: int) -> List[CellChange]:
        return self.placement_system.activate_cell(row, col)

    def mark_cell(self, row: int, col: int) -> List[CellChange]:
        return self.placement_system.mark_cell(row, col)

    def undo(self) -> bool:
        return self.history_system.undo_last()

    def state_of(self, row: int, col: int) -> CellState:
        return cell_at(self.world, get_board(self.world), row, col).state

    def queen_kind_of(self, row: int, col: int) -> Optional[QueenKind]:
        return cell_at(self.world, get_board(self.world), row, col).queen_kind

    def region_of(self, row: int, col: int) -> Region:
        cell = cell_at(self.world, get_board(self.world), row, col)
        return get_region(self.world, cell.region_id)

    def linked_cells_of(self, row: int, col: int) -> List[tuple[int, int]]:
        board = get_board(self.world)
        return [board.coord_of(index) for index in sorted(cell_at(self.world, board, row, col).linked)]

    def queens(self) -> List[tuple[int, int]]:
        return sorted(cell.coord for cell in queens_on_board(self.world, get_board(self.world)))

    def regions(self) -> List[Region]:
        return list_regions(self.world)

    def close(self) -> None:
        """Drop every entity; later lookups fail with RuntimeError."""
        self.world.clear_database()
        logger.debug("Closed puzzle session")


def create_session(
    size: int = GRID_SIZE,
    *,
    regions: Sequence[RegionSpec] | None = None,
    event_bus: EventBus | None = None,
) -> PuzzleSession:
    world = create_world(size, regions=regions)
    session = PuzzleSession(world, event_bus or EventBus())
    logger.info("Started %dx%d puzzle session", size, size)
    return session
