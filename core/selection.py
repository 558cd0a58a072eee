"""Modal selection state machine for the task picker.

`handle` is a pure transition function: it takes the current SessionState and
one key, and returns the next state together with at most one action for the
outer driver (RunTask or Quit).
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple, Union

from .fuzzy import filter_records
from .task_record import Registry, TaskRecord

QUERY_CHAR_LIMIT = 50


class Mode(Enum):
    TEXT_ENTRY = "text"
    NAVIGATION = "navigation"


class DetailLevel(Enum):
    NONE = 0
    DESCRIPTION = 1
    DESCRIPTION_AND_COMMANDS = 2

    def advance(self) -> "DetailLevel":
        order = list(DetailLevel)
        return order[(order.index(self) + 1) % len(order)]


class Key:
    """Key names understood by `handle`; printable characters are passed as-is."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    ESCAPE = "escape"
    CANCEL = "c-c"
    BACKSPACE = "backspace"
    CLEAR = "c-u"


# Navigation-mode letters
QUIT_KEY = "q"
ADVANCE_DETAIL_KEY = "l"
COLLAPSE_DETAIL_KEY = "h"
NEXT_KEY = "j"
PREVIOUS_KEY = "k"
FILTER_KEY = "/"


@dataclass(frozen=True)
class RunTask:
    name: str


@dataclass(frozen=True)
class Quit:
    pass


Action = Union[RunTask, Quit]


@dataclass(frozen=True)
class SessionState:
    registry: Registry
    mode: Mode = Mode.TEXT_ENTRY
    query: str = ""
    filtered_view: Tuple[TaskRecord, ...] = field(default_factory=tuple)
    cursor: int = 0
    detail_level: DetailLevel = DetailLevel.NONE
    terminal: bool = False

    @property
    def selected(self) -> Optional[TaskRecord]:
        if not self.filtered_view:
            return None
        return self.filtered_view[self.cursor]


def initial_state(registry: Registry) -> SessionState:
    return SessionState(registry=registry, filtered_view=tuple(registry))


def _clamp(cursor: int, total: int) -> int:
    if total <= 0:
        return 0
    return max(0, min(cursor, total - 1))


def _with_query(state: SessionState, query: str, mode: Optional[Mode] = None) -> SessionState:
    """Set the query and recompute the view; the cursor is re-clamped."""
    query = query[:QUERY_CHAR_LIMIT]
    view = filter_records(state.registry, query)
    return replace(
        state,
        mode=mode or state.mode,
        query=query,
        filtered_view=view,
        cursor=_clamp(state.cursor, len(view)),
    )


def _move(state: SessionState, delta: int) -> SessionState:
    return replace(state, cursor=_clamp(state.cursor + delta, len(state.filtered_view)))


def _confirm(state: SessionState) -> Tuple[SessionState, Optional[Action]]:
    selected = state.selected
    if selected is None:
        return state, None
    return replace(state, terminal=True), RunTask(selected.name)


def _quit(state: SessionState) -> Tuple[SessionState, Optional[Action]]:
    return replace(state, terminal=True), Quit()


def _is_char(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def _handle_text_entry(state: SessionState, key: str) -> Tuple[SessionState, Optional[Action]]:
    if key == Key.CANCEL:
        return _quit(state)
    if key == Key.ESCAPE:
        return replace(state, mode=Mode.NAVIGATION), None
    if key == Key.ENTER:
        return _confirm(state)
    if key == Key.UP:
        return _move(state, -1), None
    if key == Key.DOWN:
        return _move(state, 1), None
    if key == Key.BACKSPACE:
        if not state.query:
            return state, None
        return _with_query(state, state.query[:-1]), None
    if key == Key.CLEAR:
        if not state.query:
            return state, None
        return _with_query(state, ""), None
    if _is_char(key):
        if len(state.query) >= QUERY_CHAR_LIMIT:
            return state, None
        return _with_query(state, state.query + key), None
    return state, None


def _handle_navigation(state: SessionState, key: str) -> Tuple[SessionState, Optional[Action]]:
    if key in (Key.CANCEL, Key.ESCAPE, QUIT_KEY):
        return _quit(state)
    if key == Key.ENTER:
        return _confirm(state)
    if key in (Key.RIGHT, ADVANCE_DETAIL_KEY):
        return replace(state, detail_level=state.detail_level.advance()), None
    if key in (Key.LEFT, COLLAPSE_DETAIL_KEY):
        return replace(state, detail_level=DetailLevel.NONE), None
    if key in (Key.DOWN, NEXT_KEY):
        return _move(state, 1), None
    if key in (Key.UP, PREVIOUS_KEY):
        return _move(state, -1), None
    if key == FILTER_KEY:
        return replace(state, mode=Mode.TEXT_ENTRY), None
    if _is_char(key):
        # A bare character starts a new filter.
        return _with_query(state, key, mode=Mode.TEXT_ENTRY), None
    return state, None


def handle(state: SessionState, key: str) -> Tuple[SessionState, Optional[Action]]:
    """Apply one key press to `state`.

    Terminal states absorb every key. Confirming on an empty view returns the
    state unchanged with no action.
    """
    if state.terminal:
        return state, None
    if state.mode is Mode.TEXT_ENTRY:
        return _handle_text_entry(state, key)
    return _handle_navigation(state, key)


__all__ = [
    "QUERY_CHAR_LIMIT",
    "Mode",
    "DetailLevel",
    "Key",
    "RunTask",
    "Quit",
    "Action",
    "SessionState",
    "initial_state",
    "handle",
]
