"""
Shared fakes: clock, UI-loop scheduler, platform capabilities
"""
import pytest

from DarkScreenScripts.animation import FadeAnimator
from DarkScreenScripts.display_state import DisplayStateController
from DarkScreenScripts.logger import Logger
from DarkScreenScripts.screen import DarkScreen
from DarkScreenScripts.wake_lock import WakeLockToggle


class FakeClock:
    """Monotonic clock in whole milliseconds, advanced by hand"""

    def __init__(self, start=1_000_000):
        self.now = start

    def __call__(self):
        return self.now

    def advance_ms(self, ms):
        self.now += ms


class FakeScheduler:
    """Stand-in for ``tk.Tk.after`` that moves the fake clock when run"""

    def __init__(self, clock):
        self.clock = clock
        self.pending = []

    def __call__(self, delay_ms, callback):
        self.pending.append((delay_ms, callback))

    def step(self):
        delay_ms, callback = self.pending.pop(0)
        self.clock.advance_ms(delay_ms)
        callback()

    def run_until_idle(self, limit=1000):
        steps = 0
        while self.pending and steps < limit:
            self.step()
            steps += 1


class RecordingWakeLock:
    def __init__(self, fail=False):
        self.calls = []
        self.fail = fail

    @property
    def held(self):
        return bool(self.calls) and self.calls[-1] == "acquire"

    def acquire(self):
        self.calls.append("acquire")
        if self.fail:
            raise OSError("permission denied")

    def release(self):
        self.calls.append("release")
        if self.fail:
            raise OSError("permission denied")


class RecordingChrome:
    def __init__(self):
        self.calls = []

    def hide(self):
        self.calls.append("hide")

    def restore(self):
        self.calls.append("restore")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return FakeScheduler(clock)


@pytest.fixture
def logger(tmp_path):
    return Logger(log_dir=str(tmp_path), debug=True)


@pytest.fixture
def animator(scheduler, clock):
    return FadeAnimator(scheduler, clock=clock)


@pytest.fixture
def display(animator, clock, logger):
    return DisplayStateController(animator, clock=clock, logger=logger)


@pytest.fixture
def wake_lock():
    return RecordingWakeLock()


@pytest.fixture
def keep_awake(wake_lock, logger):
    return WakeLockToggle(wake_lock, logger)


@pytest.fixture
def chrome():
    return RecordingChrome()


@pytest.fixture
def screen(display, keep_awake, chrome, logger):
    return DarkScreen(display, keep_awake, chrome, logger)
