"""Locate the Go Task executable used to run tasks."""

import logging
import shlex
import shutil
import subprocess
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from core.errors import RunnerNotFoundError

INSTALL_HINT = (
    "Error: Task is not installed",
    "Please install Go Task:",
    "- Official repository: https://github.com/go-task/task",
    "- Installation guide: https://taskfile.dev/installation/",
)

logger = logging.getLogger("gt.runner")


@dataclass(frozen=True)
class RunnerCommand:
    """Executable plus fixed prefix arguments (e.g. `go tool task`)."""

    cmd: str
    args: Tuple[str, ...] = field(default_factory=tuple)

    def argv(self, *extra: str) -> List[str]:
        return [self.cmd, *self.args, *extra]


def _go_tool_task_available() -> bool:
    try:
        result = subprocess.run(
            ["go", "tool", "task", "--help"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return False
    return result.returncode == 0


def find_task_command(override: Optional[str] = None) -> RunnerCommand:
    """Resolve the runner: configured override, `task` on PATH, then `go tool task`."""
    if override:
        parts = shlex.split(override)
        if parts and shutil.which(parts[0]):
            logger.debug("using configured runner %s", parts)
            return RunnerCommand(cmd=parts[0], args=tuple(parts[1:]))
        logger.warning("configured runner %r not found, falling back to discovery", override)

    if shutil.which("task"):
        logger.debug("using task from PATH")
        return RunnerCommand(cmd="task")

    if _go_tool_task_available():
        logger.debug("using go tool task")
        return RunnerCommand(cmd="go", args=("tool", "task"))

    raise RunnerNotFoundError("task command not found in PATH")


__all__ = ["INSTALL_HINT", "RunnerCommand", "find_task_command"]
