from __future__ import annotations

import logging
from typing import Sequence

from esper import World

from queens.components.board import Board
from queens.components.cell import Cell
from queens.components.history import UndoHistory
from queens.constants import GRID_SIZE
from queens.factories.regions import (
    RegionSpec,
    create_regions,
    default_region_layout,
    validate_region_layout,
)

logger = logging.getLogger(__name__)


def create_world(
    size: int = GRID_SIZE,
    *,
    regions: Sequence[RegionSpec] | None = None,
) -> World:
    """Build a fresh puzzle world: regions, an all-empty board, and an empty undo stack."""
    if size <= 0:
        raise ValueError(f"Board size must be positive, got {size}")
    layout = list(regions) if regions is not None else default_region_layout(size)
    validate_region_layout(size, layout)

    world = World()
    region_lookup = create_regions(world, layout)
    board = Board(size=size)
    for row in range(size):
        for col in range(size):
            cell = Cell(
                row=row,
                col=col,
                index=board.index_of(row, col),
                region_id=region_lookup[(row, col)],
            )
            board.cells.append(world.create_entity(cell))
    world.create_entity(board)
    world.create_entity(UndoHistory())
    logger.debug("Created %dx%d world with %d regions", size, size, len(layout))
    return world
