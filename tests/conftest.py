"""Shared fakes for the Gemini SDK and the tutor runtime."""

from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from linguist_vision.config.settings import GeminiConfig  # noqa: E402
from linguist_vision.services import CredentialProvider, GenAiClientFactory  # noqa: E402


def text_response(text: str | None) -> SimpleNamespace:
    return SimpleNamespace(text=text, candidates=[])


def inline_response(data: bytes | None, mime_type: str = "image/png", *, leading_text: bool = False) -> SimpleNamespace:
    parts = []
    if leading_text:
        parts.append(SimpleNamespace(text="Here is your image", inline_data=None))
    if data is not None:
        parts.append(SimpleNamespace(text=None, inline_data=SimpleNamespace(data=data, mime_type=mime_type)))
    return SimpleNamespace(
        text=None,
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))],
    )


def video_operation(done: bool, uri: str | None = None, name: str = "operations/video-1") -> SimpleNamespace:
    response = None
    if done:
        videos = [SimpleNamespace(video=SimpleNamespace(uri=uri))] if uri else []
        response = SimpleNamespace(generated_videos=videos)
    return SimpleNamespace(name=name, done=done, error=None, response=response)


class FakeModels:
    def __init__(self, backend: "FakeGenAiBackend") -> None:
        self._backend = backend

    async def generate_content(self, *, model: str, contents: Any, config: Any = None) -> Any:
        self._backend.content_calls.append({"model": model, "contents": contents, "config": config})
        item = self._backend.content_responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    async def generate_videos(self, *, model: str, prompt: str, config: Any = None) -> Any:
        self._backend.video_calls.append({"model": model, "prompt": prompt, "config": config})
        return self._backend.video_states.pop(0)


class FakeOperations:
    def __init__(self, backend: "FakeGenAiBackend") -> None:
        self._backend = backend

    async def get(self, operation: Any) -> Any:
        self._backend.status_checks += 1
        return self._backend.video_states.pop(0)


class FakeGenAiBackend:
    """Scripted stand-in for ``google.genai.Client``."""

    def __init__(self) -> None:
        self.content_responses: list[Any] = []
        self.content_calls: list[dict[str, Any]] = []
        self.video_states: list[Any] = []
        self.video_calls: list[dict[str, Any]] = []
        self.status_checks = 0
        self.api_keys: list[str] = []

    def client(self, *, api_key: str) -> SimpleNamespace:
        self.api_keys.append(api_key)
        return SimpleNamespace(aio=SimpleNamespace(models=FakeModels(self), operations=FakeOperations(self)))


class SleepRecorder:
    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def backend() -> FakeGenAiBackend:
    return FakeGenAiBackend()


@pytest.fixture
def gemini_config() -> GeminiConfig:
    return GeminiConfig()


@pytest.fixture
def client_factory(backend: FakeGenAiBackend) -> GenAiClientFactory:
    return GenAiClientFactory(CredentialProvider(static_key="test-key"), client_cls=backend.client)


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()
