"""FastAPI app factory for the LinguistVision tutor."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from .config.dependencies import TutorRuntime, build_runtime
from .config.settings import Settings, settings
from .controllers import catalog, evaluations, history, lessons, media, speech
from .middleware import StructuredLoggingMiddleware, TelemetryMiddleware
from .views import ErrorResponse

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_PIPELINE_LOGGER = "linguist_vision.services.lesson_pipeline"
_REQUEST_LOGGER = "linguist_vision.middleware.structured"
_QUIET_LOGGERS = ("httpx", "httpcore", "google_genai", "urllib3")


def _rotating_handler(path: str, max_bytes: int, fmt: str) -> RotatingFileHandler:
    log_path = Path(path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=5, encoding="utf-8")
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure_logging(config: Settings) -> None:
    """Route app logs to stdout and a rotating file.

    Request lines get their own unformatted stdout stream. Lesson pipeline
    events are additionally written to ``config.lesson_log_file``.
    """

    root = logging.getLogger()
    root.handlers.clear()
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.addHandler(console)
    root.addHandler(_rotating_handler(config.log_file, 1_000_000, _LOG_FORMAT))
    root.setLevel(logging.DEBUG if config.debug else logging.INFO)

    requests_logger = logging.getLogger(_REQUEST_LOGGER)
    requests_logger.handlers.clear()
    request_stream = logging.StreamHandler(sys.stdout)
    request_stream.setFormatter(logging.Formatter("%(message)s"))
    requests_logger.addHandler(request_stream)
    requests_logger.setLevel(logging.DEBUG if config.debug else logging.INFO)
    requests_logger.propagate = False

    pipeline_logger = logging.getLogger(_PIPELINE_LOGGER)
    pipeline_logger.handlers.clear()
    pipeline_logger.addHandler(
        _rotating_handler(config.lesson_log_file, 500_000, "%(asctime)s | %(levelname)s | %(message)s")
    )
    pipeline_logger.setLevel(logging.INFO)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _error_body(detail: object, code: str | None) -> dict:
    if isinstance(detail, str):
        return ErrorResponse(detail=detail, code=code).model_dump()
    return {"detail": detail, "code": code}


def create_app(runtime: TutorRuntime | None = None) -> FastAPI:
    """Build the app around ``runtime``, or a runtime wired from the environment."""

    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        description="Describe a generated scene in English and get scored feedback with a spoken model answer.",
    )
    app.state.runtime = runtime or build_runtime(settings)

    app.add_middleware(TelemetryMiddleware)
    app.add_middleware(StructuredLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    for module in (catalog, lessons, evaluations, history, speech, media):
        app.include_router(module.router)

    @app.get("/", include_in_schema=False)
    async def banner() -> dict[str, str]:
        return {"service": settings.app_name, "version": settings.app_version, "docs": "/docs"}

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "healthy", "version": settings.app_version}

    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.exception_handler(HTTPException)
    async def http_error(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.detail, getattr(exc, "code", None)),
        )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content=_error_body("Internal server error", None))

    @app.on_event("shutdown")
    async def release_runtime() -> None:
        app.state.runtime.dispose()

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("linguist_vision.main:app", host=settings.host, port=settings.port, reload=settings.debug)
