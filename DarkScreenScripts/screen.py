"""
The dark screen session: mount/unmount and input handling
"""
from .animation import FadeAnimator
from .chrome import create_system_chrome
from .display_state import DisplayStateController
from .wake_lock import WakeLockToggle, create_wake_lock


class DarkScreen:
    """Composes display state, keep-awake toggle and system chrome for one session"""

    def __init__(self, display, keep_awake, chrome, logger):
        self.display = display
        self.keep_awake = keep_awake
        self.chrome = chrome
        self.logger = logger
        self.mounted = False

    @classmethod
    def create(cls, schedule, logger, clock=None, platform=None):
        """
        Build a screen wired to the running platform

        Args:
            schedule: ``after(delay_ms, callback)`` of the UI loop
            logger: Application logger
            clock: Optional monotonic clock in milliseconds
            platform: Override for ``sys.platform``
        """
        clock_kwargs = {"clock": clock} if clock is not None else {}
        animator = FadeAnimator(schedule, **clock_kwargs)
        display = DisplayStateController(animator, logger=logger, **clock_kwargs)
        keep_awake = WakeLockToggle(create_wake_lock(logger, platform), logger)
        chrome = create_system_chrome(logger, platform)
        return cls(display, keep_awake, chrome, logger)

    def mount(self):
        if self.mounted:
            return
        self.logger.write_session_log("=== Dark screen mounted ===")
        try:
            self.chrome.hide()
        except Exception as e:
            self.logger.log(f"WARNING: Could not hide system chrome: {e}")
        self.keep_awake.mount()
        self.mounted = True

    def unmount(self):
        if not self.mounted:
            return
        self.keep_awake.unmount()
        try:
            self.chrome.restore()
        except Exception as e:
            self.logger.log(f"WARNING: Could not restore system chrome: {e}")
        self.mounted = False
        self.logger.write_session_log("=== Dark screen unmounted ===")

    def run(self, mainloop):
        """Run the UI loop; the screen is unmounted however the loop ends"""
        try:
            mainloop()
        finally:
            self.unmount()

    def on_tap(self, event=None):
        """Tap anywhere in the touch area; position is ignored"""
        return self.display.toggle_controls()

    def on_color_selected(self, option):
        self.display.select_color(option)

    def on_keep_awake_pressed(self):
        return self.keep_awake.toggle_keep_awake()
