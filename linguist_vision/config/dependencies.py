"""Process-scoped runtime objects and the FastAPI dependencies exposing them."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Annotated, Any, Awaitable, Callable

import httpx
from fastapi import Depends, Request

from linguist_vision.services import (
    AudioContextProvider,
    CredentialProvider,
    EvaluationService,
    GenAiClientFactory,
    HistoryStore,
    LessonGenerator,
    MediaStore,
    SessionState,
    SpeechSynthesisService,
    VideoGenerationService,
)

from .settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class TutorRuntime:
    """Everything one tutoring session shares, with an explicit lifecycle."""

    settings: Settings
    credentials: CredentialProvider
    client_factory: GenAiClientFactory
    media_store: MediaStore
    history: HistoryStore
    session: SessionState
    audio: AudioContextProvider
    lessons: LessonGenerator
    evaluator: EvaluationService
    speech: SpeechSynthesisService

    def dispose(self) -> None:
        """Release the audio context and drop downloaded media."""

        self.audio.dispose()
        self.media_store.clear()
        logger.info("Tutor runtime disposed")


def build_runtime(
    settings: Settings,
    *,
    credentials: CredentialProvider | None = None,
    client_cls: Callable[..., Any] | None = None,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    http_client_factory: Callable[..., httpx.AsyncClient] = httpx.AsyncClient,
) -> TutorRuntime:
    """Wire the services for one process."""

    credentials = credentials or CredentialProvider()
    if client_cls is None:
        client_factory = GenAiClientFactory(credentials)
    else:
        client_factory = GenAiClientFactory(credentials, client_cls=client_cls)

    media_store = MediaStore(max_items=settings.media_cache_size)
    video_service = VideoGenerationService(
        client_factory,
        settings.gemini,
        media_store,
        sleep=sleep,
        http_client_factory=http_client_factory,
    )
    return TutorRuntime(
        settings=settings,
        credentials=credentials,
        client_factory=client_factory,
        media_store=media_store,
        history=HistoryStore(),
        session=SessionState(),
        audio=AudioContextProvider(sample_rate=settings.gemini.tts_sample_rate),
        lessons=LessonGenerator(client_factory, settings.gemini, video_service),
        evaluator=EvaluationService(client_factory, settings.gemini),
        speech=SpeechSynthesisService(client_factory, settings.gemini),
    )


def get_runtime(request: Request) -> TutorRuntime:
    return request.app.state.runtime


RuntimeDep = Annotated[TutorRuntime, Depends(get_runtime)]


__all__ = ["TutorRuntime", "build_runtime", "get_runtime", "RuntimeDep"]
