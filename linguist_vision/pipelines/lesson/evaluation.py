"""Evaluation stage: score the learner's description and record the round."""

from __future__ import annotations

import logging

from fastapi import status

from linguist_vision.config.dependencies import TutorRuntime
from linguist_vision.domain.models import HistoryItem
from linguist_vision.services import OperationInProgressError
from linguist_vision.telemetry import record_evaluation

from .errors import TutorHTTPException

logger = logging.getLogger("linguist_vision.services.lesson_pipeline")


async def submit_description(
    runtime: TutorRuntime,
    lesson_id: str,
    user_description: str,
) -> HistoryItem:
    """Evaluate ``user_description`` against the lesson and append it to history."""

    prompt = runtime.history.get_lesson(lesson_id)
    if prompt is None:
        raise TutorHTTPException(
            status.HTTP_404_NOT_FOUND,
            "Lesson not found",
            code="lesson_not_found",
        )

    try:
        async with runtime.session.loading(f"Analyzing your {prompt.difficulty.value} English..."):
            feedback = await runtime.evaluator.evaluate(
                user_description,
                prompt.description_text,
                prompt.difficulty,
            )
    except OperationInProgressError as exc:
        raise TutorHTTPException(
            status.HTTP_409_CONFLICT,
            str(exc),
            code="operation_in_progress",
        ) from exc
    except Exception as exc:
        logger.exception("Evaluation failed lesson=%s", lesson_id)
        raise TutorHTTPException(
            status.HTTP_502_BAD_GATEWAY,
            "Evaluation failed. Please try again.",
            code="evaluation_failed",
        ) from exc

    item = HistoryItem(prompt=prompt, user_description=user_description, feedback=feedback)
    runtime.history.append(item)
    record_evaluation(feedback.score)
    logger.info("Round recorded item=%s lesson=%s score=%.1f", item.id, lesson_id, feedback.score)
    return item


__all__ = ["submit_description"]
