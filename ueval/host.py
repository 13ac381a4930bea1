"""Command execution for the `run` procedure.

A runner is any callable taking the command string and returning True when the
command succeeded. Failures are reported, never raised: a non-zero exit status,
an OS error starting the shell, or a timeout all come back as False.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Optional

from ueval import CommandRunner
from ueval.config import get_run_mode, get_run_timeout

logger = logging.getLogger(__name__)


class ShellRunner:
    """Runs each command through the system shell."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def __call__(self, command: str) -> bool:
        logger.info("EXEC: %s", command)
        try:
            result = subprocess.run(command, shell=True, timeout=self.timeout)
        except subprocess.TimeoutExpired:
            logger.warning("command timed out after %ss: %s", self.timeout, command)
            return False
        except OSError as exc:
            logger.warning("command could not be started: %s (%s)", command, exc)
            return False
        if result.returncode != 0:
            logger.warning("command exited with status %d: %s", result.returncode, command)
            return False
        return True

    def __repr__(self):
        return f"ShellRunner(timeout={self.timeout!r})"


class EchoRunner:
    """Dry run: prints the command instead of executing it."""

    def __call__(self, command: str) -> bool:
        print(f"EXEC: {command}")
        return True

    def __repr__(self):
        return "EchoRunner()"


def default_runner() -> CommandRunner:
    if get_run_mode() == 'echo':
        return EchoRunner()
    return ShellRunner(timeout=get_run_timeout())
