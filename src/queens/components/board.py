from dataclasses import dataclass, field
from typing import List

@dataclass(slots=True)
class Board:
    """Square board; ``cells`` is an arena of cell entity ids indexed by ``row * size + col``."""
    size: int
    cells: List[int] = field(default_factory=list)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def index_of(self, row: int, col: int) -> int:
        return row * self.size + col

    def coord_of(self, index: int) -> tuple[int, int]:
        return divmod(index, self.size)
