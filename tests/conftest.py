import os
import random
import sys
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from tiles_config import CONFIG
from tiles_state import GameState
from tiles_tile import Tile

FIELD_W, FIELD_H = 800, 600


@pytest.fixture(autouse=True)
def pristine_config():
    saved = dict(CONFIG)
    yield
    CONFIG.clear()
    CONFIG.update(saved)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def state():
    s = GameState.idle("normal")
    s.reset("normal")
    return s


class Recorder:
    def __init__(self):
        self.signals = []

    def __call__(self, signal, score):
        self.signals.append((signal, score))

    def names(self):
        return [s for s, _ in self.signals]


@pytest.fixture
def recorder():
    return Recorder()


def make_tile(state, x=100, y=100, w=60, h=40, speed=100):
    t = Tile(state.take_id(), x, y, w, h, speed)
    state.tiles.append(t)
    return t
