"""Request logging middleware: one colored console line per request."""

from __future__ import annotations

import json
import logging
import time
import uuid
from datetime import datetime, timezone
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger("linguist_vision.middleware.structured")

_ANSI = {
    "ok": "\u001b[32m",
    "client_error": "\u001b[33m",
    "server_error": "\u001b[31m",
    "other": "\u001b[36m",
}
_ANSI_RESET = "\u001b[0m"

# Video lessons legitimately take minutes; flag anything slower than this.
SLOW_REQUEST_MS = 5_000


def _status_class(status_code: int) -> str:
    if 200 <= status_code < 300:
        return "ok"
    if 400 <= status_code < 500:
        return "client_error"
    if status_code >= 500:
        return "server_error"
    return "other"


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration, tagged with a short request id.

    The id is echoed back in the ``X-Request-ID`` header so client reports can
    be matched against the log.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        record: dict[str, Any] = {
            "request_id": request.headers.get("x-request-id") or uuid.uuid4().hex[:12],
            "at": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "method": request.method,
            "path": request.url.path,
            "client": request.client.host if request.client else None,
        }
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            record.update(status=500, duration_ms=_elapsed_ms(started), error=repr(exc))
            logger.exception(_console_line(record))
            raise

        record.update(status=response.status_code, duration_ms=_elapsed_ms(started))
        response.headers["X-Request-ID"] = record["request_id"]
        logger.info(_console_line(record))
        logger.debug(json.dumps(record, default=str, separators=(",", ":")))
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def _console_line(record: dict[str, Any]) -> str:
    status = record.get("status") or 0
    duration = record.get("duration_ms") or 0.0
    line = (
        f"[{record['request_id']}] {record['method']} {record['path']} "
        f"-> {status} in {duration:.1f}ms"
    )
    if duration >= SLOW_REQUEST_MS:
        line += " (slow)"
    if "error" in record:
        line += f" error={record['error']}"
    return f"{_ANSI[_status_class(status)]}{line}{_ANSI_RESET}"
