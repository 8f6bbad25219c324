"""
Structured logging helpers for collection workflows.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any


def log_event(
    logger: logging.Logger,
    level: int,
    event: str,
    **fields: Any,
) -> None:
    """
    Emit one structured JSON line; keys are sorted so lines diff cleanly.
    """

    payload = {"event": event, **fields}
    logger.log(level, json.dumps(payload, default=str, sort_keys=True))


@contextmanager
def timed_event(
    logger: logging.Logger,
    event: str,
    **fields: Any,
) -> Iterator[dict[str, Any]]:
    """
    Log `event` at DEBUG once the block exits, with its duration in milliseconds.

    The yielded dict can be updated inside the block to attach extra fields.
    Nothing is logged when the block raises; callers log their own failures.
    """

    extra: dict[str, Any] = {}
    started = time.monotonic()
    yield extra
    duration_ms = round((time.monotonic() - started) * 1000, 1)
    log_event(logger, logging.DEBUG, event, duration_ms=duration_ms, **fields, **extra)
