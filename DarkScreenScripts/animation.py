"""
Fade animation driven by the UI loop
"""
import time
from concurrent.futures import Future
import numpy as np
from .config import FADE_FRAME_INTERVAL_MS


def monotonic_ms():
    """Monotonic clock in whole milliseconds"""
    return time.monotonic_ns() // 1_000_000


def fade_level_at(start, end, elapsed_ms, duration_ms):
    """
    Linear fade value after ``elapsed_ms``

    Args:
        start: Level at the beginning of the fade
        end: Level once ``duration_ms`` has passed
        elapsed_ms: Time since the fade started
        duration_ms: Nominal fade duration

    Returns:
        float: Interpolated level, held at ``end`` after the duration
    """
    if duration_ms <= 0:
        return float(end)
    return float(np.interp(elapsed_ms, [0.0, duration_ms], [start, end]))


class FadeAnimator:
    """Runs one fade at a time on a scheduler such as ``tk.Tk.after``"""

    def __init__(self, schedule, clock=monotonic_ms, frame_interval_ms=FADE_FRAME_INTERVAL_MS):
        self.schedule = schedule
        self.clock = clock
        self.frame_interval_ms = frame_interval_ms
        self._current = None

    @property
    def running(self):
        return self._current is not None and not self._current.done()

    def fade(self, start, end, duration_ms, on_step):
        """
        Start a fade and return a Future resolved with ``end``

        The Future completes only once the full duration has elapsed.
        Starting a new fade cancels the one still running.
        """
        if self.running:
            self._current.cancel()

        transition = Future()
        self._current = transition
        started = self.clock()

        def tick():
            if transition.cancelled():
                return
            elapsed_ms = self.clock() - started
            on_step(fade_level_at(start, end, elapsed_ms, duration_ms))
            if elapsed_ms >= duration_ms:
                transition.set_result(end)
            else:
                self.schedule(self.frame_interval_ms, tick)

        self.schedule(self.frame_interval_ms, tick)
        return transition
