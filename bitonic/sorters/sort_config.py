"""
Sort configuration.

Values resolve with a fixed priority:
1) explicit argument
2) environment variable
3) module default
"""

from __future__ import annotations

import os
from typing import Optional

DEFAULT_MAX_WORKERS = 4
DEFAULT_DEBUG_MODE = False

MAX_WORKERS_ENV = "BITONIC_MAX_WORKERS"
DEBUG_ENV = "BITONIC_DEBUG"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def resolve_max_workers(max_workers: Optional[int] = None) -> int:
    """
    Resolve the thread pool size for the parallel executor.

    Unparseable or non-positive values fall back to DEFAULT_MAX_WORKERS.
    """
    raw = max_workers
    if raw is None:
        raw = os.getenv(MAX_WORKERS_ENV)
    if raw is None:
        return DEFAULT_MAX_WORKERS

    try:
        workers = int(raw)
        if workers > 0:
            return workers
    except (TypeError, ValueError):
        pass
    return DEFAULT_MAX_WORKERS


def resolve_debug_mode(debug: Optional[bool] = None) -> bool:
    if debug is not None:
        return bool(debug)
    raw = os.getenv(DEBUG_ENV)
    if raw is None:
        return DEFAULT_DEBUG_MODE
    return raw.strip().lower() in _TRUE_VALUES
