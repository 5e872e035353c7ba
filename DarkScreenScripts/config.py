"""
Constants and Configuration for Dark Screen
"""

# Screen colors (name, hex) - first entry is the startup color
SCREEN_COLOR_TABLE = [
    ("Black", "#000000"),
    ("Dark Grey", "#1a1a1a"),
    ("Dark Blue", "#0a0a2e"),
    ("Dark Red", "#2e0a0a"),
    ("Dark Green", "#0a2e0a"),
    ("Warm", "#1a0f00"),
]

# Timing (milliseconds)
FADE_DURATION_MS = 300      # Controls fade in/out
TAP_DEBOUNCE_MS = 300       # Taps closer together than this are ignored
FADE_FRAME_INTERVAL_MS = 16  # ~60 fps

# Wake lock
KEEP_AWAKE_DEFAULT = True

# Debug settings
DEBUG_LOGGING = False  # Set to True for verbose logging

# Log files (written to the working directory)
SESSION_LOG_NAME = "dark_screen_log.txt"

# Window
WINDOW_TITLE = "Dark Screen"
PRIMARY_MONITOR = 1  # mss index, 0 is the virtual "all monitors" screen
FALLBACK_GEOMETRY = (0, 0, 1280, 720)

# Controls panel layout
PANEL_WIDTH_RATIO = 0.85
PANEL_MAX_WIDTH = 400
PANEL_PADDING = 24
COLOR_GRID_COLUMNS = 3
SWATCH_HEIGHT = 56
TOGGLE_SIZE = (50, 28)

# Theme colors
THEME_PANEL_BG = "#1e1e1e"
THEME_TITLE = "#ffffff"
THEME_SUBTITLE = "#888888"
THEME_SECTION = "#aaaaaa"
THEME_SWATCH_LABEL = "#cccccc"
THEME_SWATCH_ACTIVE = "#ffffff"
THEME_TOGGLE_ON = "#4cd964"
THEME_TOGGLE_OFF = "#555555"
THEME_KNOB = "#ffffff"
THEME_HINT = "#ffffff"
HINT_OPACITY = 0.15  # Hint is faint white over the screen color

# Fonts
FONT_TITLE = ("Segoe UI", 22, "bold")
FONT_SUBTITLE = ("Segoe UI", 10)
FONT_SECTION = ("Segoe UI", 10, "bold")
FONT_SWATCH = ("Segoe UI", 9, "bold")
FONT_TOGGLE = ("Segoe UI", 12)
FONT_HINT = ("Segoe UI", 9)

# Texts
TEXT_TITLE = "Dark Screen"
TEXT_SUBTITLE = "Tap anywhere to hide controls"
TEXT_COLOR_SECTION = "SCREEN COLOR"
TEXT_KEEP_AWAKE = "Keep Screen Awake"
TEXT_HINT = "Tap to show controls"
