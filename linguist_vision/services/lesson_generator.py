"""Scene description and media generation for a lesson round."""

from __future__ import annotations

import base64
import logging
from typing import Any

from google.genai import types

from linguist_vision.config.settings import GeminiConfig
from linguist_vision.domain.models import Difficulty, LessonPrompt, MediaKind
from linguist_vision.services.genai_client import GenAiClientFactory
from linguist_vision.services.prompt_builder import build_scene_prompt, resolve_scene_description
from linguist_vision.services.video_generation import VideoGenerationService

logger = logging.getLogger("linguist_vision.services.lesson_pipeline")


def _truncate(value: str, max_length: int = 240) -> str:
    if len(value) <= max_length:
        return value
    return value[: max_length - 3] + "..."


def _first_candidate_parts(response: Any) -> list[Any]:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    return list(getattr(content, "parts", None) or [])


def extract_image_data_uri(response: Any) -> str:
    """Return a data URI for the first inline image part, or ``""`` when none."""

    for part in _first_candidate_parts(response):
        inline = getattr(part, "inline_data", None)
        if inline is None or not getattr(inline, "data", None):
            continue
        data = inline.data
        encoded = data if isinstance(data, str) else base64.b64encode(data).decode("ascii")
        mime_type = getattr(inline, "mime_type", None) or "image/png"
        return f"data:{mime_type};base64,{encoded}"
    return ""


class LessonGenerator:
    """Produce the scene text and its image or video for one round."""

    def __init__(
        self,
        client_factory: GenAiClientFactory,
        config: GeminiConfig,
        video_service: VideoGenerationService,
    ) -> None:
        self._client_factory = client_factory
        self._config = config
        self._video_service = video_service

    async def generate_scene_description(self, topic: str, difficulty: Difficulty) -> str:
        client = self._client_factory()
        response = await client.aio.models.generate_content(
            model=self._config.text_model,
            contents=build_scene_prompt(topic, difficulty),
        )
        description = resolve_scene_description(getattr(response, "text", None))
        logger.info("Scene description topic=%s difficulty=%s: %s", topic, difficulty.value, _truncate(description))
        return description

    async def generate_image(self, description: str) -> str:
        client = self._client_factory()
        response = await client.aio.models.generate_content(
            model=self._config.image_model,
            contents=types.Content(role="user", parts=[types.Part(text=description)]),
            config=types.GenerateContentConfig(
                image_config=types.ImageConfig(aspect_ratio=self._config.aspect_ratio),
            ),
        )
        locator = extract_image_data_uri(response)
        if not locator:
            logger.warning("Image response carried no inline data")
        return locator

    async def generate_lesson(
        self,
        topic: str,
        difficulty: Difficulty,
        media_kind: MediaKind,
    ) -> LessonPrompt:
        description = await self.generate_scene_description(topic, difficulty)
        if media_kind is MediaKind.IMAGE:
            locator = await self.generate_image(description)
        else:
            video = await self._video_service.generate(description)
            locator = video.url

        return LessonPrompt(
            media_kind=media_kind,
            resource_locator=locator,
            description_text=description,
            topic=topic,
            difficulty=difficulty,
        )


__all__ = ["LessonGenerator", "extract_image_data_uri"]
