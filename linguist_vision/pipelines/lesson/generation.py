"""Lesson generation stage: scene text plus image or video."""

from __future__ import annotations

import logging

from fastapi import status

from linguist_vision.config.dependencies import TutorRuntime
from linguist_vision.domain.models import LessonPrompt, MediaKind
from linguist_vision.services import OperationInProgressError, needs_credential_reselection
from linguist_vision.telemetry import record_lesson
from linguist_vision.views import LessonRequest

from .errors import TutorHTTPException

logger = logging.getLogger("linguist_vision.services.lesson_pipeline")

_STATUS_MESSAGES = {
    MediaKind.IMAGE: "Crafting a vivid professional scenario...",
    MediaKind.VIDEO: "Generating educational video...",
}


async def start_lesson(runtime: TutorRuntime, request: LessonRequest) -> LessonPrompt:
    """Generate a new lesson prompt and make it the current lesson."""

    if request.media_kind is MediaKind.VIDEO and not runtime.credentials.has_api_key():
        raise TutorHTTPException(
            status.HTTP_401_UNAUTHORIZED,
            "Video generation requires an API key from a paid project.",
            code="api_key_required",
        )

    try:
        async with runtime.session.loading(_STATUS_MESSAGES[request.media_kind]):
            prompt = await runtime.lessons.generate_lesson(
                request.topic,
                request.difficulty,
                request.media_kind,
            )
    except OperationInProgressError as exc:
        raise TutorHTTPException(
            status.HTTP_409_CONFLICT,
            str(exc),
            code="operation_in_progress",
        ) from exc
    except Exception as exc:
        logger.exception("Lesson generation failed topic=%s kind=%s", request.topic, request.media_kind.value)
        if needs_credential_reselection(exc):
            raise TutorHTTPException(
                status.HTTP_401_UNAUTHORIZED,
                "Please re-select your API key to continue.",
                code="api_key_reselect",
            ) from exc
        raise TutorHTTPException(
            status.HTTP_502_BAD_GATEWAY,
            "Failed to generate lesson. Please check your API key permissions.",
            code="lesson_generation_failed",
        ) from exc

    runtime.history.register_lesson(prompt)
    record_lesson(prompt.media_kind.value)
    logger.info(
        "Lesson ready id=%s topic=%s kind=%s has_media=%s",
        prompt.id,
        prompt.topic,
        prompt.media_kind.value,
        prompt.has_media,
    )
    return prompt


__all__ = ["start_lesson"]
