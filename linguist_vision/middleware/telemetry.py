"""Prometheus instrumentation for tutor HTTP requests."""

from __future__ import annotations

import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from linguist_vision.telemetry import REQUESTS_IN_PROGRESS, observe_request

# Scrapes and probes would otherwise dominate the request histogram.
_UNTRACKED_PATHS = frozenset({"/metrics", "/health"})


class TelemetryMiddleware(BaseHTTPMiddleware):
    """Count requests and observe latency per route template."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path in _UNTRACKED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        status_code = 500
        with REQUESTS_IN_PROGRESS.labels(method=request.method).track_inprogress():
            try:
                response = await call_next(request)
                status_code = response.status_code
            finally:
                observe_request(
                    request.method,
                    self._route_template(request),
                    status_code,
                    time.perf_counter() - started,
                )
        return response

    @staticmethod
    def _route_template(request: Request) -> str:
        """Use ``/lessons/{lesson_id}/evaluations`` rather than the concrete id."""

        route = request.scope.get("route")
        template = getattr(route, "path", None)
        return template or request.url.path
