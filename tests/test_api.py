"""HTTP-level tests for the lesson round endpoints."""

from __future__ import annotations

import io
import json
import wave

import httpx
import numpy as np
import pytest
from fastapi.testclient import TestClient

from conftest import inline_response, text_response, video_operation
from linguist_vision.config.dependencies import build_runtime
from linguist_vision.config.settings import Settings
from linguist_vision.main import create_app
from linguist_vision.services import CredentialProvider

FEEDBACK = {
    "score": 88,
    "corrections": [
        {"original": "stakeholder are", "correction": "stakeholders are", "explanation": "Plural noun."}
    ],
    "vocabularySuggestions": ["RACI", "elicitation", "baseline", "KPI", "handoff"],
    "overallComment": "Strong professional tone.",
    "modelSampleDescription": "The analyst walks the steering committee through the RACI matrix...",
}


def _http_factory(**kwargs):
    transport = httpx.MockTransport(
        lambda request: httpx.Response(200, content=b"video-bytes", headers={"content-type": "video/mp4"})
    )
    return httpx.AsyncClient(transport=transport, **kwargs)


@pytest.fixture
def make_client(backend, sleep_recorder):
    def factory(api_key: str = "test-key") -> TestClient:
        runtime = build_runtime(
            Settings(),
            credentials=CredentialProvider(static_key=api_key),
            client_cls=backend.client,
            sleep=sleep_recorder,
            http_client_factory=_http_factory,
        )
        return TestClient(create_app(runtime))

    return factory


def test_full_image_round(backend, make_client):
    client = make_client()
    backend.content_responses = [
        text_response("A business analyst maps a BPMN process on a glass wall."),
        inline_response(b"png-bytes"),
        text_response(json.dumps(FEEDBACK)),
    ]

    created = client.post(
        "/lessons/",
        json={"topic": "Business Analysis", "difficulty": "Intermediate", "media_kind": "image"},
    )
    assert created.status_code == 201
    lesson = created.json()
    assert lesson["resource_locator"].startswith("data:image/png;base64,")
    assert lesson["difficulty"] == "Intermediate"

    evaluated = client.post(
        f"/lessons/{lesson['id']}/evaluations",
        json={"user_description": "An analyst draws boxes and arrows on the glass."},
    )
    assert evaluated.status_code == 201
    item = evaluated.json()
    assert item["feedback"]["score"] == 88
    assert item["feedback"]["vocabulary_suggestions"][0] == "RACI"
    assert item["prompt"]["id"] == lesson["id"]
    assert item["word_count"] == 9

    history = client.get("/history/").json()
    assert [entry["id"] for entry in history] == [item["id"]]

    session = client.get("/session").json()
    assert session == {
        "is_loading": False,
        "status_message": "",
        "is_playing_audio": False,
        "has_api_key": True,
        "history_size": 1,
    }


def test_video_round_serves_downloaded_media(backend, make_client, sleep_recorder):
    client = make_client()
    backend.content_responses = [text_response("Astronauts repair a solar array.")]
    backend.video_states = [
        video_operation(done=False),
        video_operation(done=False),
        video_operation(done=False),
        video_operation(done=True, uri="https://example.com/files/v1:download?alt=media"),
    ]

    created = client.post(
        "/lessons/",
        json={"topic": "Space Exploration", "difficulty": "Advanced", "media_kind": "video"},
    )

    assert created.status_code == 201
    assert sleep_recorder.delays == [10.0, 10.0, 10.0]
    media = client.get(created.json()["resource_locator"])
    assert media.status_code == 200
    assert media.content == b"video-bytes"
    assert media.headers["content-type"] == "video/mp4"


def test_video_without_key_is_refused(backend, make_client):
    client = make_client(api_key="")

    response = client.post("/lessons/", json={"media_kind": "video"})

    assert response.status_code == 401
    assert response.json()["code"] == "api_key_required"
    assert backend.content_calls == []


def test_lesson_failure_is_generic(backend, make_client):
    client = make_client()
    backend.content_responses = [RuntimeError("500 INTERNAL")]

    response = client.post("/lessons/", json={"topic": "Nature"})

    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to generate lesson. Please check your API key permissions."
    assert client.get("/session").json()["is_loading"] is False


def test_missing_entity_asks_for_key_reselection(backend, make_client):
    client = make_client()
    backend.content_responses = [RuntimeError("404 NOT_FOUND. Requested entity was not found.")]

    response = client.post("/lessons/", json={"topic": "Nature"})

    assert response.status_code == 401
    assert response.json()["code"] == "api_key_reselect"


def test_evaluation_contract_failure(backend, make_client):
    client = make_client()
    backend.content_responses = [
        text_response("A kitchen."),
        inline_response(b"png"),
        text_response(json.dumps({"score": 50, "corrections": []})),
    ]
    lesson_id = client.post("/lessons/", json={"topic": "Cooking"}).json()["id"]

    response = client.post(f"/lessons/{lesson_id}/evaluations", json={"user_description": "Pots."})

    assert response.status_code == 502
    assert response.json()["detail"] == "Evaluation failed. Please try again."
    assert client.get("/history/").json() == []


def test_blank_description_and_unknown_lesson(make_client):
    client = make_client()

    assert client.post("/lessons/unknown/evaluations", json={"user_description": "   "}).status_code == 422
    missing = client.post("/lessons/unknown/evaluations", json={"user_description": "Hello"})
    assert missing.status_code == 404
    assert missing.json()["code"] == "lesson_not_found"


def test_history_selection_restores_current_lesson(backend, make_client):
    client = make_client()
    backend.content_responses = [
        text_response("A market stall."),
        inline_response(b"png"),
        text_response(json.dumps(FEEDBACK)),
        text_response("A neon alley."),
        inline_response(b"png"),
    ]
    first = client.post("/lessons/", json={"topic": "Daily Life"}).json()
    item = client.post(f"/lessons/{first['id']}/evaluations", json={"user_description": "Fruit."}).json()
    second = client.post("/lessons/", json={"topic": "Cyberpunk City"}).json()
    assert client.get("/lessons/current").json()["id"] == second["id"]

    selected = client.get(f"/history/{item['id']}")

    assert selected.status_code == 200
    assert client.get("/lessons/current").json()["id"] == first["id"]
    assert client.get("/history/nope").status_code == 404


def test_speech_returns_wav(backend, make_client):
    client = make_client()
    samples = np.array([0, 1000, -1000, 32767], dtype="<i2")
    backend.content_responses = [inline_response(samples.tobytes(), mime_type="audio/L16;rate=24000")]

    response = client.post("/speech/", json={"text": "Model answer."})

    assert response.status_code == 200
    assert response.headers["content-type"] == "audio/wav"
    with wave.open(io.BytesIO(response.content), "rb") as wav:
        assert wav.getframerate() == 24000
        assert wav.getnchannels() == 1
        decoded = np.frombuffer(wav.readframes(wav.getnframes()), dtype="<i2")
    np.testing.assert_array_equal(decoded, samples)


def test_speech_without_audio_is_reported(backend, make_client):
    client = make_client()
    backend.content_responses = [text_response("text only")]

    response = client.post("/speech/", json={"text": "Model answer."})

    assert response.status_code == 502
    assert response.json() == {"detail": "No audio data received", "code": "no_audio"}


def test_catalog_and_health(make_client):
    client = make_client()

    catalog = client.get("/catalog").json()
    assert catalog["topics"][0] == "Business Analysis"
    assert catalog["difficulties"] == ["Beginner", "Intermediate", "Advanced"]
    assert catalog["media_kinds"] == ["image", "video"]
    assert catalog["word_limit"] == 500
    assert catalog["stages"][0] == "Scene Description"
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/metrics").status_code == 200


