from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from esper import World

from queens.components.region import Region
from queens.constants import GRID_SIZE, REGION_LAYOUT

RegionSpec = Tuple[str, Tuple[int, int, int], Sequence[Tuple[int, int]]]

# Palette reused when a non-default board size needs generated regions.
_FALLBACK_PALETTE = [color for _, color, _ in REGION_LAYOUT]


def default_region_layout(size: int) -> List[RegionSpec]:
    """Return the compiled-in nine regions for the standard board, otherwise 2x2 blocks.

    Blocks on the last row/column of an odd-sized board are truncated.
    """
    if size == GRID_SIZE:
        return [(name, color, tuple(cells)) for name, color, cells in REGION_LAYOUT]
    blocks = (size + 1) // 2
    layout: List[RegionSpec] = []
    for block_row in range(blocks):
        for block_col in range(blocks):
            cells = tuple(
                (r, c)
                for r in range(block_row * 2, min(block_row * 2 + 2, size))
                for c in range(block_col * 2, min(block_col * 2 + 2, size))
            )
            region_id = len(layout)
            color = _FALLBACK_PALETTE[region_id % len(_FALLBACK_PALETTE)]
            layout.append((f"region_{region_id}", color, cells))
    return layout


def validate_region_layout(size: int, layout: Iterable[RegionSpec]) -> None:
    """Ensure regions are in bounds, pairwise disjoint, and cover the whole board."""
    seen: dict[Tuple[int, int], str] = {}
    for name, _, cells in layout:
        if not cells:
            raise ValueError(f"Region '{name}' has no cells")
        for row, col in cells:
            if not (0 <= row < size and 0 <= col < size):
                raise ValueError(f"Region '{name}' cell ({row}, {col}) is outside a {size}x{size} board")
            if (row, col) in seen:
                raise ValueError(
                    f"Cell ({row}, {col}) belongs to both '{seen[(row, col)]}' and '{name}'"
                )
            seen[(row, col)] = name
    missing = size * size - len(seen)
    if missing:
        raise ValueError(f"Region layout leaves {missing} cell(s) unassigned")


def create_regions(world: World, layout: Sequence[RegionSpec]) -> dict[Tuple[int, int], int]:
    """Spawn one Region entity per spec; returns coord -> region_id."""
    lookup: dict[Tuple[int, int], int] = {}
    for region_id, (name, color, cells) in enumerate(layout):
        region = Region(region_id=region_id, name=name, color=tuple(color), cells=tuple(cells))
        world.create_entity(region)
        for coord in region.cells:
            lookup[coord] = region_id
    return lookup
