"""
Main full-screen window for Dark Screen
"""
import tkinter as tk
import traceback
from .chrome import get_monitor_geometry
from .colors import SCREEN_COLORS, blend_hex, hint_color
from .config import (
    WINDOW_TITLE, PANEL_WIDTH_RATIO, PANEL_MAX_WIDTH, PANEL_PADDING,
    THEME_PANEL_BG, THEME_TITLE, THEME_SUBTITLE, THEME_SECTION,
    FONT_TITLE, FONT_SUBTITLE, FONT_SECTION, FONT_HINT,
    TEXT_TITLE, TEXT_SUBTITLE, TEXT_COLOR_SECTION, TEXT_HINT
)
from .gui_components import ColorGrid, KeepAwakeSwitch
from .logger import Logger
from .screen import DarkScreen


class DarkScreenGUI:
    """Full-screen color panel with a fading controls overlay"""

    def __init__(self, logger=None):
        self.logger = logger or Logger()
        self.root = tk.Tk()
        self.root.title(WINDOW_TITLE)
        self.root.report_callback_exception = self._handle_tk_exception

        left, top, width, height = get_monitor_geometry(logger=self.logger)
        self.root.geometry(f"{width}x{height}+{left}+{top}")
        self.root.attributes("-fullscreen", True)
        self.root.attributes("-topmost", True)
        self.panel_width = int(min(width * PANEL_WIDTH_RATIO, PANEL_MAX_WIDTH))

        self.screen = DarkScreen.create(self.root.after, self.logger)

        self._build_ui()

        self.screen.display.subscribe(lambda display: self.render())
        self.root.protocol("WM_DELETE_WINDOW", self.on_closing)
        self.root.bind("<Escape>", lambda event: self.on_closing())
        self.root.after(50, self._mount)

    def _build_ui(self):
        """Build the view tree"""
        # Everything not interactive counts as the tap area
        self.touch_area = tk.Frame(self.root, bd=0, highlightthickness=0)
        self.touch_area.pack(fill=tk.BOTH, expand=True)

        self.panel = tk.Frame(self.touch_area, padx=PANEL_PADDING, pady=PANEL_PADDING)

        title = tk.Label(self.panel, text=TEXT_TITLE, font=FONT_TITLE)
        title.pack(pady=(0, 4))
        subtitle = tk.Label(self.panel, text=TEXT_SUBTITLE, font=FONT_SUBTITLE)
        subtitle.pack(pady=(0, 24))
        section = tk.Label(self.panel, text=TEXT_COLOR_SECTION, font=FONT_SECTION, anchor="w")
        section.pack(fill=tk.X, pady=(0, 8))

        self.color_grid = ColorGrid(self.panel, SCREEN_COLORS, self.screen.on_color_selected)
        self.color_grid.frame.pack(fill=tk.X, pady=(0, 20))

        self.keep_awake_switch = KeepAwakeSwitch(self.panel, self.on_keep_awake_pressed)
        self.keep_awake_switch.frame.pack(fill=tk.X)

        self.panel_labels = [(title, THEME_TITLE), (subtitle, THEME_SUBTITLE), (section, THEME_SECTION)]

        self.hint = tk.Label(self.touch_area, text=TEXT_HINT, font=FONT_HINT)

        tap_targets = (
            self.touch_area, self.panel, title, subtitle, section,
            self.color_grid.frame, self.hint
        )
        for widget in tap_targets:
            widget.bind("<Button-1>", self.screen.on_tap)

    def _mount(self):
        self.screen.mount()
        self.render()
        self.logger.log("Dark screen ready - Escape to exit")

    def render(self):
        """Redraw from the current display and keep-awake state"""
        display = self.screen.display
        background = display.selected_color
        self.root.config(bg=background)
        self.touch_area.config(bg=background)

        if not display.controls_visible:
            self.panel.place_forget()
            self.hint.config(bg=background, fg=hint_color(background))
            self.hint.place(relx=0.5, rely=1.0, y=-60, anchor="s")
            return

        self.hint.place_forget()
        self.panel.place(relx=0.5, rely=0.5, anchor="center", width=self.panel_width)

        level = display.fade_level

        def tint(color):
            return blend_hex(background, color, level)

        panel_bg = tint(THEME_PANEL_BG)
        self.panel.config(bg=panel_bg)
        for label, color in self.panel_labels:
            label.config(bg=panel_bg, fg=tint(color))
        self.color_grid.render(display.is_active, panel_bg, tint)
        self.keep_awake_switch.render(self.screen.keep_awake.enabled, panel_bg, tint)

    def on_keep_awake_pressed(self):
        self.screen.on_keep_awake_pressed()
        self.render()

    def _handle_tk_exception(self, exc, val, tb):
        """Handle tkinter callback errors"""
        self.logger.log(f"Tkinter ERROR: {val}")
        traceback.print_exception(exc, val, tb)

    def on_closing(self):
        """Handle window close"""
        self.logger.debug("on_closing: start shutdown")
        self.screen.unmount()
        self.root.destroy()

    def run(self):
        self.screen.run(self.root.mainloop)
