import pytest


class RecordingSurface:
    """Drawing surface that records every call it receives."""

    def __init__(self):
        self.calls = []

    def new_path(self):
        self.calls.append(("new_path",))

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))

    def line_to(self, x, y):
        self.calls.append(("line_to", x, y))

    def curve_to(self, x1, y1, x2, y2, x3, y3):
        self.calls.append(("curve_to", x1, y1, x2, y2, x3, y3))

    def close_path(self):
        self.calls.append(("close_path",))


@pytest.fixture
def surface():
    return RecordingSurface()
