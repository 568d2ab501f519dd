"""
Shared fixtures: a recording fake surface and a simulated clock.
"""

import os
import sys

import pytest

# Add the source root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import EMPTY_GLYPH  # noqa: E402
from services.surface import Surface  # noqa: E402


class FakeClock:
    """Simulated time that only advances when the game sleeps."""

    def __init__(self, start: float = 0.0):
        self.now = start
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class FakeSurface(Surface):
    """
    In-memory surface.

    keys: tokens returned by successive poll_key() calls; None once exhausted.
    cells: (x, y) -> glyph for everything currently on screen
    calls: every surface call in order, for asserting on draw sequences
    """

    def __init__(self, width=40, height=20, keys=None):
        self.width = width
        self.height = height
        self.keys = list(keys or [])
        self.cells = {}
        self.calls = []
        self.polls = 0

    def get_bounds(self):
        return self.width, self.height

    def poll_key(self):
        self.polls += 1
        if self.keys:
            return self.keys.pop(0)
        return None

    def clear(self):
        self.calls.append(("clear",))
        self.cells.clear()

    def clear_cell(self, x, y):
        self.calls.append(("clear_cell", x, y))
        self.cells.pop((x, y), None)

    def draw_cell(self, x, y, glyph):
        self.calls.append(("draw_cell", x, y, glyph))
        if glyph == EMPTY_GLYPH:
            self.cells.pop((x, y), None)
        else:
            self.cells[(x, y)] = glyph

    def draw_text(self, x, y, text):
        self.calls.append(("draw_text", x, y, text))

    def flush(self):
        self.calls.append(("flush",))

    def texts(self):
        return [call[3] for call in self.calls if call[0] == "draw_text"]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def surface():
    return FakeSurface()
