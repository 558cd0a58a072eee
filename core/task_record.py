"""Task records and the per-session registry.

Pure domain logic. Records are produced by the Taskfile collaborator and are
never mutated afterwards.
"""

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from .errors import EmptyRegistryError

EMPTY_REGISTRY_MESSAGE = "No tasks found in Taskfile. Please make sure your Taskfile has tasks defined."


@dataclass(frozen=True)
class TaskRecord:
    """One runnable task as shown in the picker."""

    name: str
    description: str = ""
    commands: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError(f"Task name must be a non-empty string: {self.name!r}")
        object.__setattr__(self, "description", self.description or "")
        object.__setattr__(self, "commands", tuple(self.commands or ()))


Registry = Tuple[TaskRecord, ...]


def build_registry(records: Iterable[TaskRecord]) -> Registry:
    """Freeze records into a registry, keeping their order.

    Raises EmptyRegistryError for zero records and ValueError when two
    records share a name.
    """
    registry = tuple(records)
    if not registry:
        raise EmptyRegistryError(EMPTY_REGISTRY_MESSAGE)
    seen = set()
    for record in registry:
        if record.name in seen:
            raise ValueError(f"Duplicate task name: {record.name}")
        seen.add(record.name)
    return registry


__all__ = ["TaskRecord", "Registry", "build_registry", "EMPTY_REGISTRY_MESSAGE"]
