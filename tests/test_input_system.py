from queens.components.cell import CellState
from queens.events.bus import (
    EVENT_CELL_CLICK,
    EVENT_CELL_DRAG,
    EVENT_MOUSE_DRAG,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_UNDO_REQUEST,
)
from queens.systems.input import KEY_U, InputSystem
from queens.ui.layout import cell_at_point, cell_rect, compute_board_geometry


class DummyWindow:
    def __init__(self, width=800, height=700):
        self.width = width
        self.height = height


def _center(row, col, window=None):
    window = window or DummyWindow()
    cell_size, start_x, start_y = compute_board_geometry(window.width, window.height)
    left, right, bottom, top = cell_rect(row, col, cell_size, start_x, start_y)
    return (left + right) / 2, (bottom + top) / 2


def test_geometry_round_trips_every_cell():
    window = DummyWindow()
    for row in range(6):
        for col in range(6):
            x, y = _center(row, col, window)
            assert cell_at_point(x, y, window.width, window.height) == (row, col)


def test_row_zero_is_drawn_at_the_top():
    _, y_top = _center(0, 0)
    _, y_bottom = _center(5, 0)
    assert y_top > y_bottom


def test_points_outside_board_map_to_nothing():
    assert cell_at_point(5, 5, 800, 700) is None
    assert cell_at_point(790, 350, 800, 700) is None


def test_press_on_cell_emits_click(bus):
    InputSystem(bus, DummyWindow())
    clicks = []
    bus.subscribe(EVENT_CELL_CLICK, lambda sender, **payload: clicks.append((payload["row"], payload["col"])))
    x, y = _center(2, 3)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=4)
    assert clicks == [(2, 3)]


def test_undo_button_and_key(bus):
    system = InputSystem(bus, DummyWindow())
    requests = []
    bus.subscribe(EVENT_UNDO_REQUEST, lambda sender, **payload: requests.append(payload["source"]))
    bus.emit(EVENT_MOUSE_PRESS, x=100, y=50, button=1)
    system.handle_key_press(KEY_U)
    system.handle_key_press(97)
    assert requests == ["button", "key"]


def test_drag_emits_each_new_cell_once(bus):
    InputSystem(bus, DummyWindow())
    drags = []
    bus.subscribe(EVENT_CELL_DRAG, lambda sender, **payload: drags.append((payload["row"], payload["col"])))
    x, y = _center(1, 1)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    for coord in [(1, 1), (1, 2), (1, 2), (1, 3)]:
        x, y = _center(*coord)
        bus.emit(EVENT_MOUSE_DRAG, x=x, y=y, buttons=1)
    bus.emit(EVENT_MOUSE_RELEASE, x=0, y=0, button=1)
    x, y = _center(4, 4)
    bus.emit(EVENT_MOUSE_DRAG, x=x, y=y, buttons=1)
    assert drags == [(1, 2), (1, 3)]


def test_pointer_session_end_to_end(session, bus):
    InputSystem(bus, DummyWindow())
    x, y = _center(0, 0)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    for coord in [(0, 1), (0, 2)]:
        cx, cy = _center(*coord)
        bus.emit(EVENT_MOUSE_DRAG, x=cx, y=cy, buttons=1)
    bus.emit(EVENT_MOUSE_RELEASE, x=x, y=y, button=1)
    assert session.state_of(0, 0) is CellState.MARKED
    assert session.state_of(0, 1) is CellState.MARKED
    assert session.state_of(0, 2) is CellState.MARKED

    bus.emit(EVENT_MOUSE_PRESS, x=100, y=50, button=1)
    assert session.state_of(0, 2) is CellState.EMPTY
