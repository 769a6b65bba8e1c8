import pytest

from tsnake.render_common import Display
from tsnake.state import Command


class FakeDisplay(Display):
    """Plays back a fixed list of commands, then returns NONE forever."""

    def __init__(self, commands=(), on_poll=None):
        self.commands = list(commands)
        self.on_poll = on_poll
        self.snapshots = []
        self.timeouts = []
        self.acquired = False
        self.released = False

    def acquire(self):
        self.acquired = True

    def release(self):
        self.released = True

    def poll_command(self, timeout_ms):
        self.timeouts.append(timeout_ms)
        if self.on_poll is not None:
            self.on_poll()
        if self.commands:
            return self.commands.pop(0)
        return Command.NONE

    def render(self, snap):
        self.snapshots.append(snap)


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_display():
    """Factory: fake_display([Command.UP, Command.QUIT])."""
    return FakeDisplay
