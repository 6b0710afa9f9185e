import pytest


class FakeClock:
    """Manual clock; sleep() advances time instead of blocking."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, dt):
        self.sleeps.append(dt)
        self.now += dt


class FakeSink:
    """Records everything the animation loop asks of the terminal."""

    def __init__(self, cancel_on_poll=None):
        self.frames = []
        self.moves = []
        self.raw = False
        self.raw_entered = 0
        self.cursor_hidden = False
        self.polls = 0
        self.cancel_on_poll = cancel_on_poll

    def write_frame(self, lines):
        self.frames.append(list(lines))

    def move_cursor_up(self, n):
        self.moves.append(n)

    def poll_cancel(self):
        self.polls += 1
        return self.cancel_on_poll is not None and self.polls >= self.cancel_on_poll

    def enter_raw_mode(self):
        self.raw = True
        self.raw_entered += 1

    def exit_raw_mode(self):
        self.raw = False

    def hide_cursor(self):
        self.cursor_hidden = True

    def show_cursor(self):
        self.cursor_hidden = False


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sink():
    return FakeSink()
