"""
System chrome (taskbar) suppression and monitor geometry
"""
import sys
from mss import mss
from .config import PRIMARY_MONITOR, FALLBACK_GEOMETRY


def get_monitor_geometry(monitor_id=PRIMARY_MONITOR, logger=None):
    """
    Bounds of a monitor as reported by mss

    Args:
        monitor_id: Monitor index (1-based, 0 is the combined screen)
        logger: Optional logger for enumeration errors

    Returns:
        tuple: (left, top, width, height)
    """
    try:
        with mss() as sct:
            if monitor_id < len(sct.monitors):
                monitor = sct.monitors[monitor_id]
            elif len(sct.monitors) > 1:
                monitor = sct.monitors[1]
            else:
                return FALLBACK_GEOMETRY
            return (monitor["left"], monitor["top"], monitor["width"], monitor["height"])
    except Exception as e:
        if logger:
            logger.log(f"Error reading monitor info: {e}")
        return FALLBACK_GEOMETRY


class SystemChrome:
    """Platform without chrome to hide - the window's fullscreen mode is enough"""

    def __init__(self, logger):
        self.logger = logger

    def hide(self):
        self.logger.debug("no system chrome to hide")

    def restore(self):
        self.logger.debug("no system chrome to restore")


class WindowsTaskbarChrome(SystemChrome):
    """Hides the Windows taskbar while the screen is mounted"""

    TASKBAR_CLASSES = ("Shell_TrayWnd", "Shell_SecondaryTrayWnd")

    def __init__(self, logger, win32gui=None, win32con=None):
        super().__init__(logger)
        if win32gui is None or win32con is None:
            import win32gui
            import win32con
        self.win32gui = win32gui
        self.win32con = win32con
        self.hidden = []

    def _find(self, class_name):
        try:
            return self.win32gui.FindWindow(class_name, None)
        except Exception as e:
            self.logger.debug(f"FindWindow({class_name}) failed: {e}")
            return 0

    def hide(self):
        for class_name in self.TASKBAR_CLASSES:
            hwnd = self._find(class_name)
            if not hwnd or hwnd in self.hidden:
                continue
            try:
                self.win32gui.ShowWindow(hwnd, self.win32con.SW_HIDE)
                self.hidden.append(hwnd)
                self.logger.debug(f"taskbar {class_name} hidden (HWND: {hwnd})")
            except Exception as e:
                self.logger.log(f"WARNING: Could not hide taskbar {class_name}: {e}")

    def restore(self):
        hidden, self.hidden = self.hidden, []
        for hwnd in hidden:
            try:
                self.win32gui.ShowWindow(hwnd, self.win32con.SW_SHOW)
            except Exception as e:
                self.logger.log(f"WARNING: Could not restore taskbar (HWND: {hwnd}): {e}")


def create_system_chrome(logger, platform=None):
    """Pick the chrome implementation for the running platform"""
    platform = platform or sys.platform
    if platform == "win32":
        return WindowsTaskbarChrome(logger)
    return SystemChrome(logger)
