"""Learner submission endpoint."""

from fastapi import APIRouter, status

from linguist_vision.config.dependencies import RuntimeDep
from linguist_vision.pipelines.lesson import submit_description
from linguist_vision.views import EvaluationRequest, HistoryItemResponse

router = APIRouter(prefix="/lessons", tags=["evaluations"])


@router.post(
    "/{lesson_id}/evaluations",
    response_model=HistoryItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def evaluate_description(
    lesson_id: str,
    payload: EvaluationRequest,
    runtime: RuntimeDep,
) -> HistoryItemResponse:
    """Score the learner's description and append the round to history."""

    item = await submit_description(runtime, lesson_id, payload.user_description)
    return HistoryItemResponse.model_validate(item)
