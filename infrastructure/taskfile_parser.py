"""Taskfile discovery and decoding into TaskRecord lists."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from core import TaskRecord, Registry, build_registry
from core.errors import TaskfileError, TaskfileNotFoundError

TASKFILE_NAMES = ("Taskfile.yml", "Taskfile.yaml")

logger = logging.getLogger("gt.taskfile")


def find_taskfile(start: Optional[Path] = None) -> Path:
    """Return the nearest Taskfile in `start` (default cwd) or its parents."""
    directory = Path(start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        for name in TASKFILE_NAMES:
            path = candidate_dir / name
            if path.is_file():
                logger.debug("using Taskfile %s", path)
                return path
    raise TaskfileNotFoundError("no Taskfile.yml or Taskfile.yaml found")


def _task_description(details: Dict[str, Any]) -> str:
    desc = details.get("desc")
    if isinstance(desc, str):
        return desc
    summary = details.get("summary")
    if isinstance(summary, str):
        return summary
    return ""


def _task_commands(details: Dict[str, Any]) -> List[str]:
    cmds = details.get("cmds")
    if not isinstance(cmds, list):
        return []
    # `- task: other` and `- cmd: ...` entries are mappings; only plain strings are shown.
    return [cmd for cmd in cmds if isinstance(cmd, str)]


def parse_tasks(document: Any) -> List[TaskRecord]:
    """Extract task records from an already decoded Taskfile document."""
    if not isinstance(document, dict):
        return []
    tasks_map = document.get("tasks")
    if not isinstance(tasks_map, dict):
        return []
    records: List[TaskRecord] = []
    for name, details in tasks_map.items():
        if not isinstance(name, str):
            logger.warning("skipping task with non-string name %r", name)
            continue
        description = ""
        commands: List[str] = []
        if isinstance(details, dict):
            description = _task_description(details)
            commands = _task_commands(details)
        records.append(TaskRecord(name=name, description=description, commands=tuple(commands)))
    return records


def parse_taskfile(path: Path) -> List[TaskRecord]:
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TaskfileError(str(exc)) from exc
    try:
        document = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise TaskfileError(str(exc)) from exc
    try:
        records = parse_tasks(document)
    except ValueError as exc:
        raise TaskfileError(str(exc)) from exc
    logger.debug("parsed %d tasks from %s", len(records), path)
    return records


def load_registry(start: Optional[Path] = None) -> Registry:
    """Find, parse and freeze the session registry."""
    records = parse_taskfile(find_taskfile(start))
    try:
        return build_registry(records)
    except ValueError as exc:
        raise TaskfileError(str(exc)) from exc


__all__ = ["TASKFILE_NAMES", "find_taskfile", "parse_tasks", "parse_taskfile", "load_registry"]
