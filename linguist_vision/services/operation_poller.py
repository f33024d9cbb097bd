"""Poll a long-running remote operation until it reports completion."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Optional, TypeVar

from linguist_vision.telemetry import VIDEO_POLL_COUNTER

logger = logging.getLogger("linguist_vision.services.lesson_pipeline")

OperationT = TypeVar("OperationT")


class OperationTimeoutError(RuntimeError):
    """Raised when an operation is still pending after the configured limit."""


def _is_done(operation: Any) -> bool:
    return bool(getattr(operation, "done", False))


async def poll_until_done(
    operation: OperationT,
    refresh: Callable[[OperationT], Awaitable[OperationT]],
    *,
    interval: float,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    timeout: Optional[float] = None,
    clock: Callable[[], float] = time.monotonic,
) -> OperationT:
    """Re-check ``operation`` every ``interval`` seconds until ``done``.

    Every re-check is preceded by exactly one ``sleep(interval)``. Errors from
    ``refresh`` propagate unchanged; only a pending status is retried. With
    ``timeout`` unset the loop waits indefinitely.
    """

    started = clock()
    checks = 0
    while not _is_done(operation):
        if timeout is not None and clock() - started >= timeout:
            raise OperationTimeoutError(
                f"Operation still pending after {checks} checks ({timeout:.0f}s limit)."
            )
        await sleep(interval)
        operation = await refresh(operation)
        checks += 1
        VIDEO_POLL_COUNTER.inc()
        logger.info("Operation status check=%s done=%s", checks, _is_done(operation))
    return operation


__all__ = ["OperationTimeoutError", "poll_until_done"]
