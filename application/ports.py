from typing import List, Protocol


class RunnerPort(Protocol):
    """Anything that can build the argv for invoking the task runner."""

    def argv(self, *extra: str) -> List[str]:
        ...
