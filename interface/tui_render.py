"""Styled screen text for the task picker."""

from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core import SessionState, render_rows
from core.projection import ROLE_SELECTED
from util.responsive import clip_to_width, content_width

PADDING = 1


def build_screen_fragments(state: SessionState, term_width: int) -> List[Tuple[str, str]]:
    """Lay projected rows out for a terminal `term_width` columns wide.

    Layout: blank line, filter status, blank line, task rows, blank line,
    help. Every row is clipped to the width; the state itself is untouched.
    """
    rows = render_rows(state)
    filter_row, body, help_row = rows[0], rows[1:-1], rows[-1]
    width = content_width(term_width, PADDING)
    pad = " " * PADDING

    def line(role: str, text: str) -> Tuple[str, str]:
        clipped, _ = clip_to_width(text, width)
        return (f"class:{role}", pad + clipped + "\n")

    fragments: List[Tuple[str, str]] = [("", "\n"), line(*filter_row), ("", "\n")]
    for role, text in body:
        if role == ROLE_SELECTED:
            # Lets the window scroll so the selected row stays visible.
            fragments.append(("[SetCursorPosition]", ""))
        fragments.append(line(role, text))
    fragments.append(("", "\n"))
    role, text = help_row
    clipped, _ = clip_to_width(text, width)
    fragments.append((f"class:{role}", pad + clipped))
    return fragments


def build_screen_text(state: SessionState, term_width: int) -> FormattedText:
    return FormattedText(build_screen_fragments(state, term_width))


__all__ = ["build_screen_fragments", "build_screen_text"]
