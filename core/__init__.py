from .errors import (
    GtError,
    StartupError,
    RunnerNotFoundError,
    TaskfileError,
    TaskfileNotFoundError,
    EmptyRegistryError,
)
from .task_record import TaskRecord, Registry, build_registry
from .fuzzy import fuzzy_score, filter_records
from .selection import (
    QUERY_CHAR_LIMIT,
    Mode,
    DetailLevel,
    Key,
    RunTask,
    Quit,
    Action,
    SessionState,
    initial_state,
    handle,
)
from .projection import render, render_rows

__all__ = [
    # Errors
    "GtError",
    "StartupError",
    "RunnerNotFoundError",
    "TaskfileError",
    "TaskfileNotFoundError",
    "EmptyRegistryError",
    # Registry
    "TaskRecord",
    "Registry",
    "build_registry",
    # Filtering
    "fuzzy_score",
    "filter_records",
    # Selection
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
    # Projection
    "render",
    "render_rows",
]
