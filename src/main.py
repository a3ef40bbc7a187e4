"""Entry point for the Queens puzzle.

Sets up the puzzle session, input systems, and the Arcade window.
"""
import logging

from arcade import Window, run, set_background_color

from queens.constants import BACKGROUND_COLOR, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from queens.events.bus import (
    EVENT_MOUSE_DRAG,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EventBus,
)
from queens.session import create_session
from queens.systems.input import InputSystem
from queens.systems.render import RenderSystem


class QueensWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.event_bus = EventBus()
        self.session = create_session(event_bus=self.event_bus)
        self.input_system = InputSystem(self.event_bus, self, size=self.session.size)
        self.render_system = RenderSystem(self.session, self.event_bus, self)
        set_background_color(BACKGROUND_COLOR)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_DRAG, x=x, y=y, buttons=buttons)

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_RELEASE, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        self.input_system.handle_key_press(symbol, modifiers)

    def on_close(self):
        self.session.close()
        super().on_close()


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    QueensWindow()
    run()

if __name__ == "__main__":
    main()
