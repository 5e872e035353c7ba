"""
End-to-end tests for the dark screen session
"""
import pytest

from DarkScreenScripts.chrome import SystemChrome
from DarkScreenScripts.colors import find_color
from DarkScreenScripts.screen import DarkScreen
from DarkScreenScripts.wake_lock import WakeLock


def test_session_scenario(screen, scheduler, clock, wake_lock, chrome):
    screen.mount()
    assert screen.keep_awake.enabled
    assert wake_lock.held
    assert chrome.calls == ["hide"]
    assert screen.display.controls_visible
    assert screen.display.selected_color == "#000000"

    # Tap: hidden once the fade-out has run
    started = clock.now
    assert screen.on_tap()
    assert screen.display.controls_visible
    scheduler.run_until_idle()
    assert clock.now - started >= 300
    assert not screen.display.controls_visible

    # Tap again: visible right away, fade-in pending
    assert screen.on_tap()
    assert screen.display.controls_visible
    assert screen.display.fade_level == 0.0
    assert scheduler.pending

    screen.on_color_selected(find_color("Dark Blue"))
    assert screen.display.selected_color == "#0a0a2e"

    assert screen.on_keep_awake_pressed() is False
    assert not screen.keep_awake.enabled
    assert wake_lock.calls == ["acquire", "release"]


def test_mount_and_unmount_once(screen, wake_lock, chrome):
    screen.mount()
    screen.mount()
    screen.unmount()
    screen.unmount()
    assert wake_lock.calls == ["acquire", "release"]
    assert chrome.calls == ["hide", "restore"]
    assert not screen.mounted


def test_chrome_failure_does_not_block_mount(display, keep_awake, logger, wake_lock, capsys):
    class BrokenChrome:
        def hide(self):
            raise RuntimeError("taskbar locked")

        def restore(self):
            raise RuntimeError("taskbar locked")

    screen = DarkScreen(display, keep_awake, BrokenChrome(), logger)
    screen.mount()
    assert wake_lock.held
    screen.unmount()
    out = capsys.readouterr().out
    assert "Could not hide system chrome" in out
    assert "Could not restore system chrome" in out


def test_session_log_brackets_lifecycle(screen, logger):
    screen.mount()
    screen.unmount()
    with open(logger.session_log_path, encoding="utf-8") as f:
        lines = f.read().splitlines()
    assert lines[0].endswith("=== Dark screen mounted ===")
    assert lines[-1].endswith("=== Dark screen unmounted ===")


def test_create_wires_platform_defaults(scheduler, clock, logger):
    screen = DarkScreen.create(scheduler, logger, clock=clock, platform="linux")
    assert type(screen.keep_awake.wake_lock) is WakeLock
    assert type(screen.chrome) is SystemChrome
    assert screen.display.animator.schedule is scheduler

    screen.mount()
    assert screen.on_tap()
    scheduler.run_until_idle()
    assert not screen.display.controls_visible
    screen.unmount()


def test_interrupted_loop_still_restores_chrome(screen, wake_lock, chrome):
    def interrupted_mainloop():
        raise KeyboardInterrupt

    screen.mount()
    with pytest.raises(KeyboardInterrupt):
        screen.run(interrupted_mainloop)

    assert chrome.calls == ["hide", "restore"]
    assert not wake_lock.held
    assert not screen.mounted


def test_run_after_close_unmounts_once(screen, wake_lock, chrome):
    screen.mount()
    screen.run(screen.unmount)
    assert chrome.calls == ["hide", "restore"]
    assert wake_lock.calls == ["acquire", "release"]
