from __future__ import annotations
import logging
import os
from typing import Literal, Optional


RunMode = Literal['exec', 'echo']

# Defaults
_DEFAULT_RUN_MODE: RunMode = 'exec'
_DEFAULT_LOG_LEVEL = logging.WARNING


def get_run_mode() -> RunMode:
    """How `run` handles commands: 'exec' runs them, 'echo' only prints them."""
    raw = os.environ.get('UEVAL_RUN_MODE', '').strip().lower()
    if not raw:
        return _DEFAULT_RUN_MODE
    if raw not in ('exec', 'echo'):
        raise ValueError(f"UEVAL_RUN_MODE must be 'exec' or 'echo', got {raw!r}")
    return raw  # type: ignore[return-value]


def get_run_timeout() -> Optional[float]:
    raw = os.environ.get('UEVAL_RUN_TIMEOUT', '').strip()
    if not raw:
        return None
    timeout = float(raw)
    if timeout <= 0:
        raise ValueError(f"UEVAL_RUN_TIMEOUT must be positive, got {raw!r}")
    return timeout


def get_log_level() -> int:
    """
    Determine log level from LOGLEVEL environment variable.
    Defaults to WARNING if not set.
    """
    loglevel_env = os.getenv('LOGLEVEL', '').upper()
    if loglevel_env:
        level = getattr(logging, loglevel_env, None)
        if isinstance(level, int):
            return level
    return _DEFAULT_LOG_LEVEL
