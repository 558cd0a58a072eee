"""Pure projection of a SessionState onto display lines."""

from typing import List, Tuple

from .selection import DetailLevel, Mode, SessionState

FILTER_PLACEHOLDER = "Type to filter tasks..."
FILTER_PREFIX = "Filter: "
EMPTY_VIEW_TEXT = "No matching tasks"
NAVIGATION_HELP = "↑/↓: navigate • →: toggle details • ←: hide details • /: filter • enter: select • q: quit"
TEXT_ENTRY_HELP = "↑/↓: navigate • esc: navigation mode • enter: select • ctrl+c: quit"

# Row roles, mapped to style classes by the terminal layer.
ROLE_FILTER = "filter"
ROLE_PLACEHOLDER = "filter.placeholder"
ROLE_TASK = "task"
ROLE_SELECTED = "selected"
ROLE_DETAIL = "detail"
ROLE_EMPTY = "empty"
ROLE_HELP = "help"

Row = Tuple[str, str]


def render_rows(state: SessionState) -> List[Row]:
    """Return (role, text) rows: filter status, tasks, help."""
    rows: List[Row] = []
    if state.query:
        rows.append((ROLE_FILTER, FILTER_PREFIX + state.query))
    else:
        rows.append((ROLE_PLACEHOLDER, FILTER_PLACEHOLDER))

    if not state.filtered_view:
        rows.append((ROLE_EMPTY, EMPTY_VIEW_TEXT))
    for idx, task in enumerate(state.filtered_view):
        if idx != state.cursor:
            rows.append((ROLE_TASK, task.name))
            continue
        line = task.name
        if state.detail_level is not DetailLevel.NONE and task.description:
            line += " - " + task.description
        rows.append((ROLE_SELECTED, line))
        if state.detail_level is DetailLevel.DESCRIPTION_AND_COMMANDS and task.commands:
            rows.append((ROLE_DETAIL, "  cmds:"))
            for cmd in task.commands:
                rows.append((ROLE_DETAIL, "    - " + cmd))

    help_text = NAVIGATION_HELP if state.mode is Mode.NAVIGATION else TEXT_ENTRY_HELP
    rows.append((ROLE_HELP, help_text))
    return rows


def render(state: SessionState) -> List[str]:
    return [text for _, text in render_rows(state)]


__all__ = [
    "render",
    "render_rows",
    "FILTER_PLACEHOLDER",
    "FILTER_PREFIX",
    "EMPTY_VIEW_TEXT",
    "NAVIGATION_HELP",
    "TEXT_ENTRY_HELP",
]
