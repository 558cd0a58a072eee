"""Hand-off of task execution to the external runner process."""

import logging
import subprocess
import sys
from typing import List, Sequence

from application.ports import RunnerPort

LAUNCH_FAILURE_EXIT_CODE = 1

logger = logging.getLogger("gt.dispatch")


def _exit_code(returncode: int) -> int:
    # Popen reports death by signal N as -N; shells report 128 + N.
    if returncode < 0:
        return 128 - returncode
    return returncode


def _wait(proc: "subprocess.Popen[bytes]") -> int:
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            # The child shares our foreground process group and got the same SIGINT.
            continue


def _run(argv: List[str]) -> int:
    logger.debug("running %s", argv)
    proc = subprocess.Popen(argv)
    code = _exit_code(_wait(proc))
    logger.debug("%s exited with %d", argv, code)
    return code


def run_selected(runner: RunnerPort, task_name: str) -> int:
    """Run one task chosen in the picker and return its exit code."""
    return run_direct(runner, [task_name])


def run_direct(runner: RunnerPort, args: Sequence[str]) -> int:
    """Forward `args` verbatim to the runner with inherited standard streams.

    Returns the runner's exit code unchanged, or LAUNCH_FAILURE_EXIT_CODE when
    the runner could not be started at all.
    """
    argv = runner.argv(*args)
    try:
        return _run(argv)
    except OSError as exc:
        logger.error("failed to launch %s: %s", argv, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return LAUNCH_FAILURE_EXIT_CODE


__all__ = ["LAUNCH_FAILURE_EXIT_CODE", "run_selected", "run_direct"]
