from typing import Tuple

from wcwidth import wcwidth

ELLIPSIS = "…"
MIN_CONTENT_WIDTH = 10


def content_width(term_width: int, padding: int = 1) -> int:
    """Usable line width inside the picker for a terminal `term_width` columns wide."""
    return max(MIN_CONTENT_WIDTH, term_width - 2 * padding)


def _char_width(ch: str) -> int:
    # Control and combining characters report -1/0; treat them as zero-width.
    return max(0, wcwidth(ch))


def display_width(text: str) -> int:
    return sum(_char_width(ch) for ch in text)


def clip_to_width(text: str, width: int) -> Tuple[str, bool]:
    """Cut `text` to at most `width` terminal columns, ending in `…` when cut.

    Returns the clipped text and whether anything was removed.
    """
    if width <= 0:
        return "", bool(text)
    if display_width(text) <= width:
        return text, False
    budget = width - display_width(ELLIPSIS)
    out = []
    used = 0
    for ch in text:
        w = _char_width(ch)
        if used + w > budget:
            break
        out.append(ch)
        used += w
    return "".join(out) + ELLIPSIS, True
