"""
GUI components and widgets for Dark Screen
"""
import tkinter as tk
from .config import (
    COLOR_GRID_COLUMNS, SWATCH_HEIGHT, TOGGLE_SIZE,
    THEME_SWATCH_LABEL, THEME_SWATCH_ACTIVE, THEME_TOGGLE_ON,
    THEME_TOGGLE_OFF, THEME_KNOB, THEME_TITLE,
    FONT_SWATCH, FONT_TOGGLE, TEXT_KEEP_AWAKE
)


class ColorGrid:
    """Grid of screen color swatches"""

    def __init__(self, parent_frame, options, on_select_callback):
        self.options = options
        self.on_select_callback = on_select_callback
        self.frame = tk.Frame(parent_frame, highlightthickness=0, bd=0)
        self.swatches = {}

        for idx, option in enumerate(options):
            row, col = divmod(idx, COLOR_GRID_COLUMNS)
            cell = tk.Frame(self.frame, height=SWATCH_HEIGHT, highlightthickness=2, bd=0, cursor="hand2")
            cell.grid(row=row, column=col, padx=5, pady=5, sticky="nsew")
            cell.grid_propagate(False)
            cell.pack_propagate(False)
            label = tk.Label(cell, text=option.name, font=FONT_SWATCH, bd=0, cursor="hand2")
            label.pack(fill=tk.BOTH, expand=True)
            for widget in (cell, label):
                widget.bind("<Button-1>", lambda event, opt=option: self._on_click(opt))
            self.swatches[option] = (cell, label)

        for col in range(COLOR_GRID_COLUMNS):
            self.frame.grid_columnconfigure(col, weight=1, uniform="swatch")

    def _on_click(self, option):
        self.on_select_callback(option)
        # Keep the click away from the tap area behind the panel
        return "break"

    def render(self, is_active, panel_bg, tint):
        """
        Redraw swatches

        Args:
            is_active: Callable telling whether an option is selected
            panel_bg: Current panel background
            tint: Callable mapping a nominal color to its faded color
        """
        self.frame.config(bg=panel_bg)
        for option, (cell, label) in self.swatches.items():
            swatch_bg = tint(option.color)
            border = tint(THEME_SWATCH_ACTIVE) if is_active(option) else swatch_bg
            cell.config(bg=swatch_bg, highlightbackground=border, highlightcolor=border)
            label.config(bg=swatch_bg, fg=tint(THEME_SWATCH_LABEL))


class KeepAwakeSwitch:
    """Toggle row with a drawn on/off switch"""

    def __init__(self, parent_frame, on_toggle_callback):
        self.on_toggle_callback = on_toggle_callback
        self.width, self.height = TOGGLE_SIZE

        self.frame = tk.Frame(parent_frame, cursor="hand2")
        self.label = tk.Label(self.frame, text=TEXT_KEEP_AWAKE, font=FONT_TOGGLE, cursor="hand2")
        self.label.pack(side=tk.LEFT, pady=4)
        self.canvas = tk.Canvas(
            self.frame,
            width=self.width,
            height=self.height,
            highlightthickness=0,
            bd=0,
            cursor="hand2"
        )
        self.canvas.pack(side=tk.RIGHT, pady=4)

        for widget in (self.frame, self.label, self.canvas):
            widget.bind("<Button-1>", self._on_click)

    def _on_click(self, event=None):
        self.on_toggle_callback()
        return "break"

    def render(self, enabled, panel_bg, tint):
        """Redraw the switch for the current keep-awake state"""
        self.frame.config(bg=panel_bg)
        self.label.config(bg=panel_bg, fg=tint(THEME_TITLE))
        self.canvas.config(bg=panel_bg)
        self.canvas.delete("all")

        w, h = self.width, self.height
        track = tint(THEME_TOGGLE_ON if enabled else THEME_TOGGLE_OFF)
        # Rounded track: two half circles joined by a rectangle
        self.canvas.create_oval(0, 0, h, h, fill=track, outline=track)
        self.canvas.create_oval(w - h, 0, w, h, fill=track, outline=track)
        self.canvas.create_rectangle(h / 2, 0, w - h / 2, h, fill=track, outline=track)

        knob = h - 4
        x0 = w - knob - 2 if enabled else 2
        knob_color = tint(THEME_KNOB)
        self.canvas.create_oval(x0, 2, x0 + knob, 2 + knob, fill=knob_color, outline=knob_color)
