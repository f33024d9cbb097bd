"""Speech stage: synthesize the model answer and decode it for playback."""

from __future__ import annotations

import logging

from fastapi import status
from fastapi.concurrency import run_in_threadpool

from linguist_vision.config.dependencies import TutorRuntime
from linguist_vision.services import OperationInProgressError, SpeechSynthesisError
from linguist_vision.services.audio_decode import decode_base64_audio
from linguist_vision.telemetry import record_speech

from .errors import TutorHTTPException

logger = logging.getLogger("linguist_vision.services.lesson_pipeline")


async def synthesize_model_answer(runtime: TutorRuntime, text: str) -> bytes:
    """Return WAV bytes of ``text`` spoken by the configured voice."""

    config = runtime.settings.gemini
    try:
        async with runtime.session.playing_audio():
            payload = await runtime.speech.generate_speech(text)
            ctx = runtime.audio.get()
            buffer = await run_in_threadpool(
                decode_base64_audio,
                payload,
                ctx,
                config.tts_sample_rate,
                config.tts_channels,
            )
            wav_bytes = await run_in_threadpool(buffer.to_wav_bytes)
    except OperationInProgressError as exc:
        raise TutorHTTPException(
            status.HTTP_409_CONFLICT,
            str(exc),
            code="audio_in_progress",
        ) from exc
    except SpeechSynthesisError as exc:
        record_speech("no_audio")
        logger.warning("Speech synthesis returned no audio: %s", exc)
        raise TutorHTTPException(
            status.HTTP_502_BAD_GATEWAY,
            str(exc),
            code="no_audio",
        ) from exc
    except Exception as exc:
        record_speech("error")
        logger.exception("Audio playback failed", exc_info=exc)
        raise TutorHTTPException(
            status.HTTP_502_BAD_GATEWAY,
            "Audio playback failed",
            code="speech_failed",
        ) from exc

    record_speech("ok")
    logger.info(
        "Speech decoded frames=%s duration=%.2fs channels=%s rate=%s",
        buffer.length,
        buffer.duration,
        buffer.number_of_channels,
        buffer.sample_rate,
    )
    return wav_bytes


__all__ = ["synthesize_model_answer"]
