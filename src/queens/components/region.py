from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True, frozen=True)
class Region:
    """Read-only colored group of cells; used for the baseline look of its cells."""
    region_id: int
    name: str
    color: Tuple[int, int, int]
    cells: Tuple[Tuple[int, int], ...]
