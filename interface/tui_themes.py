"""Colour palettes for the picker, keyed by the row roles of core.projection."""

import logging
from typing import Dict

from prompt_toolkit.styles import Style

from config import DEFAULT_THEME
from core.projection import (
    ROLE_DETAIL,
    ROLE_EMPTY,
    ROLE_FILTER,
    ROLE_HELP,
    ROLE_PLACEHOLDER,
    ROLE_SELECTED,
    ROLE_TASK,
)

logger = logging.getLogger("gt.tui")

THEMES: Dict[str, Dict[str, str]] = {
    # xterm 252 / 170 / 240, the colours of the original picker
    "classic": {
        "": "#d0d0d0",
        ROLE_FILTER: "#d0d0d0",
        ROLE_PLACEHOLDER: "#808080",
        ROLE_TASK: "#d0d0d0",
        ROLE_SELECTED: "#d75fd7 bold",
        ROLE_DETAIL: "#585858",
        ROLE_EMPTY: "#808080 italic",
        ROLE_HELP: "#626262",
    },
    "midnight": {
        "": "#c5cde0",
        ROLE_FILTER: "#7aa2f7 bold",
        ROLE_PLACEHOLDER: "#565f89",
        ROLE_TASK: "#c5cde0",
        ROLE_SELECTED: "bg:#292e42 #9ece6a bold",
        ROLE_DETAIL: "#8a93b5",
        ROLE_EMPTY: "#e0af68",
        ROLE_HELP: "#565f89",
    },
    "high-contrast": {
        "": "#ffffff",
        ROLE_FILTER: "#ffff00 bold",
        ROLE_PLACEHOLDER: "#a8a8a8",
        ROLE_TASK: "#ffffff",
        ROLE_SELECTED: "bg:#ffffff #000000 bold",
        ROLE_DETAIL: "#d0d0d0",
        ROLE_EMPTY: "#ff8700 bold",
        ROLE_HELP: "#a8a8a8",
    },
}


def resolve_theme(name: str) -> str:
    """Return `name` if it is a known theme, else the default one."""
    if name in THEMES:
        return name
    logger.warning("unknown theme %r, using %s", name, DEFAULT_THEME)
    return DEFAULT_THEME


def get_theme_palette(name: str) -> Dict[str, str]:
    return dict(THEMES[resolve_theme(name)])


def build_style(name: str) -> Style:
    return Style.from_dict(get_theme_palette(name))


__all__ = ["THEMES", "DEFAULT_THEME", "resolve_theme", "get_theme_palette", "build_style"]
