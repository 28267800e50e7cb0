from datetime import timedelta

import pytest

from dailyword.config.game_settings import EPOCH
from dailyword.services.engine import Engine
from dailyword.services.puzzle_selector import PuzzleSelector, SEQUENTIAL
from dailyword.services.state_store import MemoryStateStore

ANSWERS = ["CRANE", "SLATE", "ABIDE"]
GUESSES = ["TRACE", "EERIE", "SPEED", "GREET", "HOUSE", "PLANT", "MOUSE", "CRATE"]


class FakeClock:
    """Controllable UTC clock."""

    def __init__(self, now=None):
        self.now = now or EPOCH + timedelta(hours=12)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


class RecordingSleep:
    """Records every requested delay instead of waiting; can run a hook while 'suspended'."""

    def __init__(self, during=None):
        self.calls = []
        self.during = during

    def __call__(self, seconds):
        self.calls.append(seconds)
        if self.during is not None:
            self.during()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def store():
    return MemoryStateStore()


@pytest.fixture
def selector():
    return PuzzleSelector(ANSWERS, policy=SEQUENTIAL)


@pytest.fixture
def engine(selector, store, clock, sleep):
    return Engine(selector, answers=ANSWERS, guesses=GUESSES, store=store, clock=clock, sleep=sleep,
                  reveal_step_delay=0.15, shake_delay=0.25)


def play(engine, word):
    engine.edit_current_guess(word)
    return engine.submit_guess()
