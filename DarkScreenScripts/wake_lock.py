"""
Keep-awake handling: platform wake locks and the keep-awake toggle
"""
import ctypes
import sys
from .config import KEEP_AWAKE_DEFAULT

# SetThreadExecutionState flags
ES_CONTINUOUS = 0x80000000
ES_SYSTEM_REQUIRED = 0x00000001
ES_DISPLAY_REQUIRED = 0x00000002


class WakeLock:
    """Platform without a wake lock - calls are only logged"""

    def __init__(self, logger):
        self.logger = logger

    def acquire(self):
        self.logger.debug("wake lock not supported on this platform (acquire)")

    def release(self):
        self.logger.debug("wake lock not supported on this platform (release)")


class WindowsWakeLock(WakeLock):
    """Keeps display and system awake via SetThreadExecutionState"""

    def __init__(self, logger, kernel32=None):
        super().__init__(logger)
        self.kernel32 = kernel32 if kernel32 is not None else ctypes.windll.kernel32

    def _set_state(self, flags):
        # Previous state on success, 0 on failure
        if not self.kernel32.SetThreadExecutionState(flags):
            raise OSError(f"SetThreadExecutionState(0x{flags:08x}) failed")

    def acquire(self):
        self._set_state(ES_CONTINUOUS | ES_SYSTEM_REQUIRED | ES_DISPLAY_REQUIRED)

    def release(self):
        self._set_state(ES_CONTINUOUS)


def create_wake_lock(logger, platform=None):
    """Pick the wake lock implementation for the running platform"""
    platform = platform or sys.platform
    if platform == "win32":
        return WindowsWakeLock(logger)
    logger.log(f"WARNING: No wake lock on {platform} - screen may still go to sleep")
    return WakeLock(logger)


class WakeLockToggle:
    """
    Owns the keep-awake flag

    ``enabled`` mirrors whether the platform lock is held: every flip is
    paired with exactly one acquire or release call. A failing platform
    call is logged and the flag flips anyway.
    """

    def __init__(self, wake_lock, logger):
        self.wake_lock = wake_lock
        self.logger = logger
        self.enabled = KEEP_AWAKE_DEFAULT

    def _call(self, action):
        try:
            getattr(self.wake_lock, action)()
        except Exception as e:
            self.logger.log(f"WARNING: Wake lock {action} failed: {e}")

    def mount(self):
        """Acquire the lock unconditionally; keep-awake starts on"""
        self._call("acquire")
        self.enabled = True
        self.logger.write_session_log("Wake lock acquired (mount)")

    def toggle_keep_awake(self):
        """Flip the keep-awake flag and return the new value"""
        if self.enabled:
            self._call("release")
            self.enabled = False
        else:
            self._call("acquire")
            self.enabled = True
        self.logger.write_session_log(f"Keep awake {'on' if self.enabled else 'off'}")
        return self.enabled

    def unmount(self):
        """Release the lock if it is still held"""
        if self.enabled:
            self._call("release")
            self.enabled = False
            self.logger.write_session_log("Wake lock released (unmount)")
