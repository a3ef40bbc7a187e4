"""Walkthrough of a short game on the standard board."""
import pytest

from queens.components.cell import CellState, QueenKind
from queens.errors import OutOfBoundsError
from helpers import board_snapshot, coords_in_state


def test_corner_then_center_then_conflict(session):
    assert session.activate_cell(0, 0) == [((0, 0), CellState.MARKED)]

    session.activate_cell(0, 0)
    assert session.queen_kind_of(0, 0) is QueenKind.VALID
    for coord in [(0, 1), (1, 0), (1, 1)] + [(0, c) for c in range(6)] + [(r, 0) for r in range(6)]:
        if coord != (0, 0):
            assert session.state_of(*coord) is CellState.MARKED

    # (2, 2) sits outside the first queen's row, column and neighborhood.
    assert session.state_of(2, 2) is CellState.EMPTY
    session.activate_cell(2, 2)
    session.activate_cell(2, 2)
    assert session.queen_kind_of(2, 2) is QueenKind.VALID

    # (0, 1) is already marked, so a single activation places a queen; it shares row 0.
    changes = session.activate_cell(0, 1)
    assert changes == [((0, 1), CellState.QUEEN_CONFLICTING)]
    assert session.queen_kind_of(0, 1) is QueenKind.CONFLICTING

    assert session.queens() == [(0, 0), (0, 1), (2, 2)]


def test_out_of_range_activation_on_standard_board(session):
    session.activate_cell(3, 3)
    before = board_snapshot(session)
    with pytest.raises(OutOfBoundsError):
        session.activate_cell(6, 0)
    assert board_snapshot(session) == before
    assert coords_in_state(session, CellState.MARKED) == {(3, 3)}


def test_regions_follow_standard_layout(session):
    region = session.region_of(0, 0)
    assert region.name == "rose"
    assert region.color == (255, 204, 204)
    assert session.region_of(1, 1) == region
    assert session.region_of(5, 5).name == "sky"
    assert session.region_of(3, 2).region_id == 4
