"""
Screen color options and color math
"""
from collections import namedtuple
import numpy as np
from .config import SCREEN_COLOR_TABLE, THEME_HINT, HINT_OPACITY


ColorOption = namedtuple("ColorOption", ["name", "color"])

SCREEN_COLORS = tuple(ColorOption(name, color) for name, color in SCREEN_COLOR_TABLE)
DEFAULT_COLOR = SCREEN_COLORS[0]


def find_color(name):
    """Return the ColorOption called ``name``"""
    for option in SCREEN_COLORS:
        if option.name == name:
            return option
    raise KeyError(f"Unknown screen color: {name}")


def hex_to_rgb(hex_color):
    """
    Parse a ``#rrggbb`` string

    Returns:
        numpy.ndarray: RGB components as floats (0-255)
    """
    value = hex_color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected #rrggbb, got {hex_color!r}")
    return np.array([int(value[i:i + 2], 16) for i in (0, 2, 4)], dtype=float)


def rgb_to_hex(rgb):
    clipped = np.clip(np.rint(rgb), 0, 255).astype(int)
    return "#{:02x}{:02x}{:02x}".format(*(int(c) for c in clipped))


def blend_hex(background, foreground, level):
    """
    Mix ``foreground`` over ``background``

    Args:
        background: Hex color shown at level 0
        foreground: Hex color shown at level 1
        level: Opacity of the foreground (clamped to 0.0 - 1.0)

    Returns:
        str: Resulting hex color
    """
    level = float(np.clip(level, 0.0, 1.0))
    bg = hex_to_rgb(background)
    fg = hex_to_rgb(foreground)
    return rgb_to_hex(bg + (fg - bg) * level)


def hint_color(background):
    """Faint hint text color over ``background``"""
    return blend_hex(background, THEME_HINT, HINT_OPACITY)
