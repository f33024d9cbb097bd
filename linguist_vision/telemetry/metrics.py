"""Prometheus metrics definitions and helpers."""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests processed",
    ("method", "route", "status"),
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ("method", "route"),
    buckets=(
        0.005,
        0.01,
        0.025,
        0.05,
        0.1,
        0.25,
        0.5,
        1.0,
        2.5,
        5.0,
        10.0,
        30.0,
        60.0,
        300.0,
    ),
)

ERROR_COUNTER = Counter(
    "app_internal_errors_total",
    "Number of requests ending in internal server error responses",
    ("method", "route"),
)

REQUESTS_IN_PROGRESS = Gauge(
    "tutor_http_requests_in_progress",
    "HTTP requests currently being served",
    ("method",),
)

LESSON_COUNTER = Counter(
    "tutor_lessons_generated_total",
    "Lesson prompts generated, by media kind",
    ("media_kind",),
)

VIDEO_POLL_COUNTER = Counter(
    "tutor_video_status_checks_total",
    "Status checks issued against long-running video jobs",
)

EVALUATION_SCORE = Histogram(
    "tutor_evaluation_score",
    "Scores returned for learner descriptions",
    buckets=(10, 20, 30, 40, 50, 60, 70, 80, 90, 100),
)

SPEECH_COUNTER = Counter(
    "tutor_speech_synthesis_total",
    "Speech synthesis requests, by outcome",
    ("outcome",),
)


def observe_request(method: str, route: str, status_code: int, duration_seconds: float) -> None:
    """Record one finished request; 5xx responses also count as internal errors."""

    method = method or "UNKNOWN"
    route = route or "unknown"
    REQUEST_COUNT.labels(method=method, route=route, status=str(status_code)).inc()
    REQUEST_LATENCY.labels(method=method, route=route).observe(max(duration_seconds, 0.0))
    if status_code >= 500:
        ERROR_COUNTER.labels(method=method, route=route).inc()


def record_lesson(media_kind: str) -> None:
    LESSON_COUNTER.labels(media_kind=media_kind).inc()


def record_evaluation(score: float) -> None:
    EVALUATION_SCORE.observe(score)


def record_speech(outcome: str) -> None:
    SPEECH_COUNTER.labels(outcome=outcome).inc()
