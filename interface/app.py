#!/usr/bin/env python3
"""
gt: interactive wrapper for Go Task.

Provides a fuzzy-searchable interface for the tasks of your Taskfile.

When run without arguments, launches an interactive TUI.
When run with arguments, passes them directly to task.

Examples:
  gt                  # Launch interactive TUI
  gt build            # Run the 'build' task
  gt -l               # List all available tasks
  gt clean test       # Run 'clean' and then 'test' tasks
"""

import logging
import sys
from typing import List, Optional, Sequence

import config
from application.dispatcher import run_direct, run_selected
from core import Quit, Registry, RunTask
from core.errors import EmptyRegistryError, RunnerNotFoundError, StartupError
from infrastructure.runner_locator import INSTALL_HINT, RunnerCommand, find_task_command
from infrastructure.taskfile_parser import load_registry
from util.logging_setup import setup_logging
from .tui_app import cmd_tui

logger = logging.getLogger("gt.app")


def _locate_runner() -> Optional[RunnerCommand]:
    try:
        return find_task_command(config.get_task_bin())
    except RunnerNotFoundError as exc:
        logger.debug("runner lookup failed: %s", exc)
        for line in INSTALL_HINT:
            print(line)
        return None


def _load_registry() -> Optional[Registry]:
    try:
        return load_registry()
    except EmptyRegistryError as exc:
        print(exc)
    except StartupError as exc:
        print(f"Error parsing Taskfile: {exc}")
    return None


def run_interactive(runner: RunnerCommand, registry: Registry) -> int:
    try:
        action = cmd_tui(registry, theme=config.get_theme(), ttimeoutlen=config.get_ttimeoutlen())
    except Exception as exc:  # prompt_toolkit/terminal failures
        logger.exception("TUI failed")
        print(f"Error running program: {exc}")
        return 1

    if isinstance(action, RunTask):
        return run_selected(runner, action.name)
    if action is not None and not isinstance(action, Quit):
        logger.warning("unexpected session result: %r", action)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Flags are not parsed here: every argument belongs to task.
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    setup_logging(config.get_log_level(), config.get_log_file())

    runner = _locate_runner()
    if runner is None:
        return 1

    # Both modes require a loadable Taskfile.
    registry = _load_registry()
    if registry is None:
        return 1

    if args:
        return run_direct(runner, args)
    return run_interactive(runner, registry)


__all__ = ["main", "run_interactive"]
