"""Veo video generation: submit, poll until done, download the artifact."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

import httpx
from google.genai import types

from linguist_vision.config.settings import GeminiConfig
from linguist_vision.services.genai_client import GenAiClientFactory
from linguist_vision.services.media_store import MediaStore
from linguist_vision.services.operation_poller import OperationTimeoutError, poll_until_done

logger = logging.getLogger("linguist_vision.services.lesson_pipeline")


class VideoGenerationError(RuntimeError):
    """Raised when a finished video job yields no usable artifact."""


class VideoGenerationTimeout(VideoGenerationError):
    """Raised when a video job exceeds the configured maximum wait."""


@dataclass(frozen=True)
class VideoResult:
    url: str
    prompt_text: str
    source_uri: str


def extract_video_uri(operation: Any) -> str:
    """Pull the first generated video URI out of a finished operation."""

    error = getattr(operation, "error", None)
    if error:
        raise VideoGenerationError(f"Video generation failed: {error}")

    response = getattr(operation, "response", None)
    videos = getattr(response, "generated_videos", None) or []
    if not videos:
        raise VideoGenerationError("Video job finished without generated videos.")
    video = getattr(videos[0], "video", None)
    uri = getattr(video, "uri", None)
    if not uri:
        raise VideoGenerationError("Generated video has no download URI.")
    return uri


class VideoGenerationService:
    """Generate a short lesson video and expose it through the media store."""

    def __init__(
        self,
        client_factory: GenAiClientFactory,
        config: GeminiConfig,
        media_store: MediaStore,
        *,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        http_client_factory: Callable[..., httpx.AsyncClient] = httpx.AsyncClient,
    ) -> None:
        self._client_factory = client_factory
        self._config = config
        self._media_store = media_store
        self._sleep = sleep
        self._http_client_factory = http_client_factory

    async def generate(self, prompt_text: str) -> VideoResult:
        client = self._client_factory()
        operation = await client.aio.models.generate_videos(
            model=self._config.video_model,
            prompt=prompt_text,
            config=types.GenerateVideosConfig(
                number_of_videos=1,
                resolution=self._config.video_resolution,
                aspect_ratio=self._config.aspect_ratio,
            ),
        )
        logger.info("Video job submitted name=%s", getattr(operation, "name", None))

        async def refresh(current: Any) -> Any:
            return await client.aio.operations.get(current)

        try:
            operation = await poll_until_done(
                operation,
                refresh,
                interval=self._config.poll_interval_seconds,
                sleep=self._sleep,
                timeout=self._config.video_max_wait_seconds,
            )
        except OperationTimeoutError as exc:
            raise VideoGenerationTimeout(str(exc)) from exc

        source_uri = extract_video_uri(operation)
        data, content_type = await self.download(source_uri)
        url = self._media_store.put(data, content_type=content_type)
        logger.info("Video stored url=%s bytes=%s", url, len(data))
        return VideoResult(url=url, prompt_text=prompt_text, source_uri=source_uri)

    async def download(self, uri: str) -> tuple[bytes, str]:
        """Fetch the artifact with the API key appended as the ``key`` parameter."""

        api_key = self._client_factory.credentials.get_api_key()
        async with self._http_client_factory(
            timeout=self._config.download_timeout_seconds,
            follow_redirects=True,
        ) as http:
            response = await http.get(uri, params={"key": api_key})
            response.raise_for_status()
        content_type = response.headers.get("content-type", "video/mp4")
        return response.content, content_type


__all__ = [
    "VideoGenerationError",
    "VideoGenerationService",
    "VideoGenerationTimeout",
    "VideoResult",
    "extract_video_uri",
]
