"""
Tests for the fade animator
"""
import pytest

from DarkScreenScripts.animation import fade_level_at


def test_fade_level_at():
    assert fade_level_at(1.0, 0.0, 0, 300) == 1.0
    assert fade_level_at(1.0, 0.0, 150, 300) == pytest.approx(0.5)
    assert fade_level_at(0.0, 1.0, 300, 300) == 1.0
    assert fade_level_at(0.0, 1.0, 900, 300) == 1.0


def test_zero_duration_jumps_to_end():
    assert fade_level_at(1.0, 0.0, 0, 0) == 0.0


def test_fade_completes_only_after_duration(animator, scheduler, clock):
    steps = []
    started = clock.now
    transition = animator.fade(1.0, 0.0, 300, steps.append)

    assert not transition.done()
    assert animator.running
    while not transition.done():
        assert clock.now - started < 300
        scheduler.step()

    assert clock.now - started >= 300
    assert transition.result() == 0.0
    assert steps[-1] == 0.0
    assert steps == sorted(steps, reverse=True)
    assert not animator.running
    assert not scheduler.pending


def test_frames_use_frame_interval(scheduler, clock):
    from DarkScreenScripts.animation import FadeAnimator

    animator = FadeAnimator(scheduler, clock=clock, frame_interval_ms=50)
    animator.fade(0.0, 1.0, 300, lambda level: None)
    assert scheduler.pending[0][0] == 50


def test_new_fade_cancels_running_one(animator, scheduler):
    first_steps = []
    second_steps = []
    first = animator.fade(0.0, 1.0, 300, first_steps.append)
    scheduler.step()
    scheduler.step()
    seen = len(first_steps)

    second = animator.fade(first_steps[-1], 0.0, 300, second_steps.append)
    assert first.cancelled()

    scheduler.run_until_idle()
    assert len(first_steps) == seen
    assert second.result() == 0.0
    assert second_steps[0] < first_steps[-1]


def test_default_clock_counts_whole_milliseconds():
    from DarkScreenScripts.animation import monotonic_ms

    first = monotonic_ms()
    assert isinstance(first, int)
    assert monotonic_ms() >= first
