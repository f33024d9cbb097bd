"""Lesson options and session status endpoints."""

from fastapi import APIRouter

from linguist_vision.config.dependencies import RuntimeDep
from linguist_vision.domain.models import Difficulty, MediaKind
from linguist_vision.pipelines.lesson import LessonRoundPipeline
from linguist_vision.services.prompt_builder import TOPICS
from linguist_vision.views import CatalogResponse, SessionStatusResponse

router = APIRouter(tags=["catalog"])

PIPELINE_STAGES = tuple(LessonRoundPipeline.describe())
"""Ordered round metadata used for quick reference and debugging."""


@router.get("/catalog", response_model=CatalogResponse)
async def get_catalog(runtime: RuntimeDep) -> CatalogResponse:
    """List the topics, levels and media kinds a lesson can use."""

    return CatalogResponse(
        topics=list(TOPICS),
        difficulties=list(Difficulty),
        media_kinds=list(MediaKind),
        word_limit=runtime.settings.word_limit,
        stages=[stage.name for stage in PIPELINE_STAGES],
    )


@router.get("/session", response_model=SessionStatusResponse)
async def get_session_status(runtime: RuntimeDep) -> SessionStatusResponse:
    """Report in-flight flags so the client can disable its controls."""

    return SessionStatusResponse(
        is_loading=runtime.session.is_loading,
        status_message=runtime.session.status_message,
        is_playing_audio=runtime.session.is_playing_audio,
        has_api_key=runtime.credentials.has_api_key(),
        history_size=len(runtime.history),
    )
