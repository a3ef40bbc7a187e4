import sys, os

import pytest

# Ensure src (and this directory, for helpers) is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
for path in (SRC, os.path.dirname(os.path.abspath(__file__))):
    if path not in sys.path:
        sys.path.insert(0, path)

from queens.events.bus import EventBus
from queens.session import create_session


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def session(bus):
    puzzle = create_session(event_bus=bus)
    yield puzzle
    puzzle.close()
