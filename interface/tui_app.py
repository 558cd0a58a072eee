"""Full-screen prompt_toolkit driver for the selection state machine."""

import logging
import os
from typing import Callable, Optional

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl

from core import Action, Key, Registry, SessionState, handle, initial_state
from .tui_render import build_screen_text
from .tui_themes import DEFAULT_THEME, build_style

logger = logging.getLogger("gt.tui")

KEY_ALIASES = {
    Keys.Up: Key.UP,
    Keys.Down: Key.DOWN,
    Keys.Left: Key.LEFT,
    Keys.Right: Key.RIGHT,
    Keys.ControlM: Key.ENTER,
    Keys.ControlJ: Key.ENTER,
    Keys.Escape: Key.ESCAPE,
    Keys.ControlC: Key.CANCEL,
    Keys.ControlH: Key.BACKSPACE,
    Keys.ControlU: Key.CLEAR,
}


def normalize_key(key) -> Optional[str]:
    """Map a prompt_toolkit key to a state-machine key name, or None to drop it."""
    if isinstance(key, Keys):
        return KEY_ALIASES.get(key)
    if isinstance(key, str) and len(key) == 1 and key.isprintable():
        return key
    return None


class TaskPickerTUI:
    def __init__(
        self,
        registry: Registry,
        theme: str = DEFAULT_THEME,
        ttimeoutlen: float = 0.05,
        width_provider: Optional[Callable[[], int]] = None,
    ):
        self.state: SessionState = initial_state(registry)
        self.action: Optional[Action] = None
        self.style = build_style(theme)
        self._width_provider = width_provider or self.get_terminal_width

        kb = KeyBindings()

        @kb.add(Keys.BracketedPaste)
        def _(event):
            for ch in event.data:
                if self.feed(ch):
                    event.app.exit(result=self.action)
                    return

        @kb.add(Keys.Any)
        def _(event):
            key = event.key_sequence[0].key if event.key_sequence else None
            if self.feed(key):
                event.app.exit(result=self.action)

        self.body = Window(
            content=FormattedTextControl(self.get_screen_text, show_cursor=False),
            always_hide_cursor=True,
            wrap_lines=False,
        )
        self.app = Application(
            layout=Layout(HSplit([self.body])),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
        )
        # Esc must not wait the default 0.5s for a possible escape sequence.
        self.app.ttimeoutlen = ttimeoutlen

    @staticmethod
    def get_terminal_width() -> int:
        """Get current terminal width, default to 100 if unavailable."""
        try:
            return os.get_terminal_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    def feed(self, raw_key) -> bool:
        """Apply one raw key press; True once the session is finished."""
        key = normalize_key(raw_key)
        if key is None:
            return self.state.terminal
        self.state, action = handle(self.state, key)
        if action is not None:
            logger.debug("session finished with %s", action)
            self.action = action
        return self.state.terminal

    def get_screen_text(self) -> FormattedText:
        return build_screen_text(self.state, self._width_provider())

    def run(self) -> Optional[Action]:
        self.app.run()
        return self.action


def cmd_tui(registry: Registry, theme: str = DEFAULT_THEME, ttimeoutlen: float = 0.05) -> Optional[Action]:
    tui = TaskPickerTUI(registry, theme=theme, ttimeoutlen=ttimeoutlen)
    return tui.run()


__all__ = ["KEY_ALIASES", "normalize_key", "TaskPickerTUI", "cmd_tui"]
