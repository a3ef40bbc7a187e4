from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Set, Tuple


class QueenKind(Enum):
    """Classification of a queen at the moment it was placed."""
    VALID = auto()
    CONFLICTING = auto()


class CellState(Enum):
    """Closed set of cell states; a queen state always carries its kind."""
    EMPTY = "empty"
    MARKED = "marked"
    QUEEN_VALID = "queen_valid"
    QUEEN_CONFLICTING = "queen_conflicting"

    @property
    def is_queen(self) -> bool:
        return self in (CellState.QUEEN_VALID, CellState.QUEEN_CONFLICTING)

    @property
    def queen_kind(self) -> Optional[QueenKind]:
        if self is CellState.QUEEN_VALID:
            return QueenKind.VALID
        if self is CellState.QUEEN_CONFLICTING:
            return QueenKind.CONFLICTING
        return None

    @classmethod
    def queen(cls, kind: QueenKind) -> "CellState":
        return cls.QUEEN_VALID if kind is QueenKind.VALID else cls.QUEEN_CONFLICTING


@dataclass(slots=True)
class Cell:
    """One board square.

    ``index`` is the arena slot (``row * size + col``) on the owning Board.
    ``linked`` holds the arena indexes a valid queen on this cell auto-marked;
    it stays empty for every other state.
    """
    row: int
    col: int
    index: int
    region_id: int
    state: CellState = CellState.EMPTY
    linked: Set[int] = field(default_factory=set)

    @property
    def coord(self) -> Tuple[int, int]:
        return (self.row, self.col)

    @property
    def queen_kind(self) -> Optional[QueenKind]:
        return self.state.queen_kind
