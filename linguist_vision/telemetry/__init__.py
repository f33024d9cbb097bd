"""Telemetry helpers and metrics."""

from .metrics import (
    ERROR_COUNTER,
    EVALUATION_SCORE,
    LESSON_COUNTER,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    REQUESTS_IN_PROGRESS,
    SPEECH_COUNTER,
    VIDEO_POLL_COUNTER,
    observe_request,
    record_evaluation,
    record_lesson,
    record_speech,
)

__all__ = [
    "ERROR_COUNTER",
    "EVALUATION_SCORE",
    "LESSON_COUNTER",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "REQUESTS_IN_PROGRESS",
    "SPEECH_COUNTER",
    "VIDEO_POLL_COUNTER",
    "observe_request",
    "record_evaluation",
    "record_lesson",
    "record_speech",
]
