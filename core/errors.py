"""Error types shared by gt layers."""


class GtError(Exception):
    """Base class for all gt errors."""


class StartupError(GtError):
    """Fatal condition detected before the interactive session starts."""


class RunnerNotFoundError(StartupError):
    pass


class TaskfileError(StartupError):
    pass


class TaskfileNotFoundError(TaskfileError):
    pass


class EmptyRegistryError(StartupError):
    pass


__all__ = [
    "GtError",
    "StartupError",
    "RunnerNotFoundError",
    "TaskfileError",
    "TaskfileNotFoundError",
    "EmptyRegistryError",
]
