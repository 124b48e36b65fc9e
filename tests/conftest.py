import math
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from entities.player import Player
from maze.grid_map import GridMap


class RecordingGraphics:
    """Renderer stand-in that records every call."""

    def __init__(self):
        self.calls = []

    def draw_point(self, x, y, size, color):
        self.calls.append(("point", x, y, size, color))

    def draw_rect(self, x, y, w, h, color):
        self.calls.append(("rect", x, y, w, h, color))

    def draw_line(self, x0, y0, x1, y1, color):
        self.calls.append(("line", x0, y0, x1, y1, color))

    def clear(self):
        self.calls.append(("clear",))

    def of_kind(self, kind):
        return [call for call in self.calls if call[0] == kind]


def bordered_rows(size=8, inner_walls=((5, 5),)):
    rows = []
    for row in range(size):
        rows.append([1 if row in (0, size - 1) or col in (0, size - 1) else 0
                     for col in range(size)])
    for col, row in inner_walls:
        rows[row][col] = 1
    return rows


@pytest.fixture
def bordered_map() -> GridMap:
    return GridMap.from_rows(bordered_rows(), tile_size=64)


@pytest.fixture
def player() -> Player:
    return Player(300, 300, math.pi)


@pytest.fixture
def gfx() -> RecordingGraphics:
    return RecordingGraphics()
