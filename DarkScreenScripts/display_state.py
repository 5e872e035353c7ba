"""
Screen color and controls visibility state
"""
from dataclasses import dataclass
from .animation import monotonic_ms
from .colors import DEFAULT_COLOR, SCREEN_COLORS
from .config import FADE_DURATION_MS, TAP_DEBOUNCE_MS


@dataclass
class DisplayState:
    selected_color: str
    controls_visible: bool = True
    fade_level: float = 1.0


class DisplayStateController:
    """
    Owns the background color and the VISIBLE / HIDDEN controls state

    Showing is instant-then-fade: the controls exist before they fade in.
    Hiding is fade-then-instant: the controls disappear only once the
    fade-out has completed.
    """

    def __init__(self, animator, clock=monotonic_ms, logger=None,
                 fade_duration_ms=FADE_DURATION_MS,
                 debounce_ms=TAP_DEBOUNCE_MS):
        self.animator = animator
        self.clock = clock
        self.logger = logger
        self.colors = SCREEN_COLORS
        self.fade_duration_ms = fade_duration_ms
        self.debounce_ms = debounce_ms

        self.state = DisplayState(selected_color=DEFAULT_COLOR.color)
        self.last_tap = None
        self.listeners = []

    def subscribe(self, listener):
        """Call ``listener(controller)`` after every state change"""
        self.listeners.append(listener)

    def _notify(self):
        for listener in list(self.listeners):
            listener(self)

    def _debug(self, message):
        if self.logger:
            self.logger.debug(message)

    @property
    def selected_color(self):
        return self.state.selected_color

    @property
    def controls_visible(self):
        return self.state.controls_visible

    @property
    def fade_level(self):
        return self.state.fade_level

    def is_active(self, option):
        return option.color == self.state.selected_color

    def select_color(self, option):
        """Switch the background color immediately"""
        if option not in self.colors:
            raise ValueError(f"Not a screen color: {option!r}")
        self.state.selected_color = option.color
        self._debug(f"select_color: {option.name} ({option.color})")
        self._notify()

    def toggle_controls(self):
        """
        Show or hide the controls in response to a tap

        Returns:
            bool: False when the tap fell inside the debounce window
        """
        now = self.clock()
        if self.last_tap is not None and now - self.last_tap < self.debounce_ms:
            self._debug("toggle_controls: debounced")
            return False
        self.last_tap = now

        if self.state.controls_visible:
            self._debug("toggle_controls: fading out")
            transition = self.animator.fade(
                self.state.fade_level, 0.0, self.fade_duration_ms, self._on_fade_step
            )
            transition.add_done_callback(self._on_fade_out_done)
        else:
            self._debug("toggle_controls: showing")
            self.state.controls_visible = True
            self._notify()
            self.animator.fade(
                self.state.fade_level, 1.0, self.fade_duration_ms, self._on_fade_step
            )
        return True

    def _on_fade_step(self, level):
        self.state.fade_level = level
        self._notify()

    def _on_fade_out_done(self, transition):
        # Superseded by a newer fade
        if transition.cancelled():
            return
        self.state.controls_visible = False
        self._debug("toggle_controls: hidden")
        self._notify()
