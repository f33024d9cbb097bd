"""Tests for the poll-until-done loop and the Veo video service."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace

import httpx
import pytest

from conftest import video_operation
from linguist_vision.config.settings import GeminiConfig
from linguist_vision.services import MediaStore
from linguist_vision.services.operation_poller import OperationTimeoutError, poll_until_done
from linguist_vision.services.video_generation import (
    VideoGenerationError,
    VideoGenerationService,
    VideoGenerationTimeout,
    extract_video_uri,
)


def test_poller_sleeps_before_each_recheck(sleep_recorder):
    """Three pending checks then done: exactly three delayed re-checks."""

    states = [SimpleNamespace(done=False), SimpleNamespace(done=False), SimpleNamespace(done=True)]
    events: list[str] = []

    async def recording_sleep(delay: float) -> None:
        events.append("sleep")
        await sleep_recorder(delay)

    async def refresh(_operation):
        events.append("check")
        return states.pop(0)

    result = asyncio.run(
        poll_until_done(SimpleNamespace(done=False), refresh, interval=10.0, sleep=recording_sleep)
    )

    assert result.done is True
    assert sleep_recorder.delays == [10.0, 10.0, 10.0]
    assert events == ["sleep", "check"] * 3


def test_poller_returns_immediately_when_already_done(sleep_recorder):
    async def refresh(_operation):
        raise AssertionError("should not be called")

    done = SimpleNamespace(done=True)
    assert asyncio.run(poll_until_done(done, refresh, interval=10.0, sleep=sleep_recorder)) is done
    assert sleep_recorder.delays == []


def test_poller_propagates_refresh_errors(sleep_recorder):
    async def refresh(_operation):
        raise ConnectionError("network down")

    with pytest.raises(ConnectionError):
        asyncio.run(poll_until_done(SimpleNamespace(done=False), refresh, interval=1.0, sleep=sleep_recorder))
    assert sleep_recorder.delays == [1.0]


def test_poller_times_out_when_limit_configured(sleep_recorder):
    now = [0.0]

    async def advancing_sleep(delay: float) -> None:
        now[0] += delay
        await sleep_recorder(delay)

    async def refresh(_operation):
        return SimpleNamespace(done=False)

    with pytest.raises(OperationTimeoutError):
        asyncio.run(
            poll_until_done(
                SimpleNamespace(done=False),
                refresh,
                interval=10.0,
                sleep=advancing_sleep,
                timeout=25.0,
                clock=lambda: now[0],
            )
        )
    assert sleep_recorder.delays == [10.0, 10.0, 10.0]


def _mock_http(requests: list[httpx.Request], status_code: int = 200):
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code, content=b"mp4-bytes", headers={"content-type": "video/mp4"})

    def factory(**kwargs):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler), **kwargs)

    return factory


def test_video_service_polls_then_downloads(backend, client_factory, sleep_recorder):
    uri = "https://generativelanguage.googleapis.com/v1beta/files/abc:download?alt=media"
    backend.video_states = [
        video_operation(done=False),
        video_operation(done=False),
        video_operation(done=False),
        video_operation(done=False),
        video_operation(done=True, uri=uri),
    ]
    requests: list[httpx.Request] = []
    store = MediaStore()
    service = VideoGenerationService(
        client_factory,
        GeminiConfig(),
        store,
        sleep=sleep_recorder,
        http_client_factory=_mock_http(requests),
    )

    result = asyncio.run(service.generate("A BA presenting a RACI matrix"))

    assert backend.status_checks == 4
    assert sleep_recorder.delays == [10.0] * 4
    config = backend.video_calls[0]["config"]
    assert config.number_of_videos == 1
    assert config.resolution == "720p"
    assert config.aspect_ratio == "16:9"

    assert len(requests) == 1
    assert requests[0].url.params["key"] == "test-key"
    assert requests[0].url.params["alt"] == "media"

    assert result.prompt_text == "A BA presenting a RACI matrix"
    assert result.source_uri == uri
    media_id = result.url.rsplit("/", 1)[-1]
    assert store.get(media_id).data == b"mp4-bytes"


def test_video_service_raises_on_download_failure(backend, client_factory, sleep_recorder):
    backend.video_states = [video_operation(done=True, uri="https://example.com/v?alt=media")]
    service = VideoGenerationService(
        client_factory,
        GeminiConfig(),
        MediaStore(),
        sleep=sleep_recorder,
        http_client_factory=_mock_http([], status_code=403),
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(service.generate("prompt"))


def test_video_service_timeout_is_reported(backend, client_factory):
    backend.video_states = [video_operation(done=False) for _ in range(3)]

    async def short_wait(_delay: float) -> None:
        await asyncio.sleep(0.01)

    config = GeminiConfig(video_max_wait_seconds=0.005)
    service = VideoGenerationService(client_factory, config, MediaStore(), sleep=short_wait)

    with pytest.raises(VideoGenerationTimeout):
        asyncio.run(service.generate("prompt"))
    assert backend.status_checks == 1


def test_extract_video_uri_requires_a_video():
    with pytest.raises(VideoGenerationError):
        extract_video_uri(video_operation(done=True, uri=None))
    with pytest.raises(VideoGenerationError):
        extract_video_uri(SimpleNamespace(done=True, error={"message": "blocked"}, response=None))
