"""Gemini text-to-speech returning raw PCM16 audio as base64."""

from __future__ import annotations

import base64
import logging
from typing import Any

from google.genai import types

from linguist_vision.config.settings import GeminiConfig
from linguist_vision.services.genai_client import GenAiClientFactory
from linguist_vision.services.prompt_builder import build_speech_prompt

logger = logging.getLogger(__name__)


class SpeechSynthesisError(RuntimeError):
    """Raised when the TTS response carries no audio payload."""


def extract_audio_payload(response: Any) -> str | None:
    """Return the first part's inline audio of the first candidate as base64."""

    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    if not parts:
        return None
    inline = getattr(parts[0], "inline_data", None)
    data = getattr(inline, "data", None) if inline is not None else None
    if not data:
        return None
    if isinstance(data, str):
        return data
    return base64.b64encode(data).decode("ascii")


class SpeechSynthesisService:
    """Synthesize the spoken model answer with a single prebuilt voice."""

    def __init__(self, client_factory: GenAiClientFactory, config: GeminiConfig) -> None:
        self._client_factory = client_factory
        self._config = config

    async def generate_speech(self, text: str) -> str:
        client = self._client_factory()
        response = await client.aio.models.generate_content(
            model=self._config.tts_model,
            contents=[types.Content(role="user", parts=[types.Part(text=build_speech_prompt(text))])],
            config=types.GenerateContentConfig(
                response_modalities=["AUDIO"],
                speech_config=types.SpeechConfig(
                    voice_config=types.VoiceConfig(
                        prebuilt_voice_config=types.PrebuiltVoiceConfig(
                            voice_name=self._config.voice_name,
                        ),
                    ),
                ),
            ),
        )

        payload = extract_audio_payload(response)
        if not payload:
            raise SpeechSynthesisError("No audio data received")
        logger.info("Speech synthesized voice=%s chars=%s", self._config.voice_name, len(text))
        return payload


__all__ = ["SpeechSynthesisError", "SpeechSynthesisService", "extract_audio_payload"]
