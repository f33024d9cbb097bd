"""Lesson round endpoints."""

from fastapi import APIRouter, HTTPException, status

from linguist_vision.config.dependencies import RuntimeDep
from linguist_vision.pipelines.lesson import start_lesson
from linguist_vision.views import LessonPromptResponse, LessonRequest

router = APIRouter(prefix="/lessons", tags=["lessons"])


@router.post(
    "/",
    response_model=LessonPromptResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_lesson(payload: LessonRequest, runtime: RuntimeDep) -> LessonPromptResponse:
    """Generate a scene description and its image or video."""

    prompt = await start_lesson(runtime, payload)
    return LessonPromptResponse.model_validate(prompt)


@router.get("/current", response_model=LessonPromptResponse)
async def get_current_lesson(runtime: RuntimeDep) -> LessonPromptResponse:
    """Return the lesson the learner is currently working on."""

    current = runtime.history.current
    if current is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No lesson started yet",
        )
    return LessonPromptResponse.model_validate(current)
