import random

import pytest

from termsnake.geometry import PlayArea


class RecordingScreen:
    """Screen fake that records every call as a tuple."""

    def __init__(self):
        self.calls = []
        self.flushes = 0

    def clear(self):
        self.calls.append(("clear",))

    def goto(self, x, y):
        self.calls.append(("goto", x, y))

    def set_fg(self, color):
        self.calls.append(("fg", color))

    def set_bg(self, color):
        self.calls.append(("bg", color))

    def reset_bg(self):
        self.calls.append(("reset_bg",))

    def write(self, text):
        self.calls.append(("write", text))

    def flush(self):
        self.flushes += 1


@pytest.fixture
def screen():
    return RecordingScreen()


@pytest.fixture
def area():
    return PlayArea(80, 24)


@pytest.fixture
def rng():
    return random.Random(1234)
