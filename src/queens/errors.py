"""Errors raised by the board engine."""


class OutOfBoundsError(IndexError):
    """A coordinate falls outside the board."""

    def __init__(self, row: int, col: int, size: int):
        super().__init__(f"Cell ({row}, {col}) is outside a {size}x{size} board")
        self.row = row
        self.col = col
        self.size = size


class InvalidStateTransitionError(RuntimeError):
    """A cell holds a state the placement engine does not know how to leave."""
