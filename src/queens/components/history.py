from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple

from queens.components.cell import CellState, QueenKind


@dataclass(slots=True, frozen=True)
class CellSnapshot:
    index: int
    state: CellState
    linked: FrozenSet[int] = frozenset()


@dataclass(slots=True, frozen=True)
class HistoryEntry:
    """Pre-transition snapshot of the activated cell plus every cell the transition touched.

    ``snapshots[0]`` always describes the activated cell itself.
    """
    coord: Tuple[int, int]
    snapshots: Tuple[CellSnapshot, ...]
    description: str = ""

    @property
    def previous_state(self) -> CellState:
        return self.snapshots[0].state

    @property
    def previous_queen_kind(self) -> Optional[QueenKind]:
        return self.snapshots[0].state.queen_kind

    @property
    def previous_linked(self) -> FrozenSet[int]:
        return self.snapshots[0].linked


@dataclass(slots=True)
class UndoHistory:
    """LIFO stack of history entries for one puzzle session."""
    entries: List[HistoryEntry] = field(default_factory=list)

    def push(self, entry: HistoryEntry) -> None:
        self.entries.append(entry)

    def pop(self) -> Optional[HistoryEntry]:
        if not self.entries:
            return None
        return self.entries.pop()

    def peek(self) -> Optional[HistoryEntry]:
        return self.entries[-1] if self.entries else None

    def __len__(self) -> int:
        return len(self.entries)
