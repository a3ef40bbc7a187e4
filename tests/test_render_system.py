from queens.components.cell import CellState
from queens.constants import MARKED_COLOR
from queens.systems.render import RenderSystem
from helpers import place_queen


class DummyWindow:
    def __init__(self, width=800, height=700):
        self.width = width
        self.height = height


def test_state_cache_follows_change_batches(session, bus):
    render = RenderSystem(session, bus, DummyWindow())
    rose = session.region_of(0, 0).color
    assert render.fill_color(0, 1) == rose

    place_queen(session, 0, 0)
    assert render._states[(0, 0)] is CellState.QUEEN_VALID
    assert render.fill_color(0, 1) == MARKED_COLOR
    assert render.fill_color(0, 0) == rose

    session.undo()
    assert render._states[(0, 0)] is CellState.MARKED
    assert render.fill_color(0, 1) == rose
    assert render.fill_color(0, 0) == MARKED_COLOR


def test_state_cache_seeded_from_existing_board(session, bus):
    session.activate_cell(3, 3)
    render = RenderSystem(session, bus, DummyWindow())
    assert render.fill_color(3, 3) == MARKED_COLOR
    assert render.fill_color(5, 5) == session.region_of(5, 5).color
