"""
Logging utilities for Dark Screen
"""
import os
from datetime import datetime
from .config import DEBUG_LOGGING, SESSION_LOG_NAME


class Logger:
    """Handles console and session file logging"""

    def __init__(self, log_dir=None, debug=DEBUG_LOGGING):
        self.log_dir = log_dir or os.getcwd()
        self.session_log_path = os.path.join(self.log_dir, SESSION_LOG_NAME)
        self.debug_enabled = debug

    def log(self, message):
        """Console log"""
        print(message)

    def debug(self, message):
        """Console log, only with DEBUG_LOGGING enabled"""
        if self.debug_enabled:
            self.log(f"DEBUG {message}")

    def write_session_log(self, message):
        """Append a timestamped lifecycle line to the session log"""
        try:
            with open(self.session_log_path, "a", encoding="utf-8") as f:
                timestamp = datetime.now().isoformat(timespec="milliseconds")
                f.write(f"[{timestamp}] {message}\n")
                f.flush()
            self.log(f"SESSION: {message}")
        except Exception as e:
            self.log(f"WARNING: Could not write session log: {e}")
