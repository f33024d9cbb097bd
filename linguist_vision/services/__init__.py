"""Service layer helpers for external integrations."""

from .audio_decode import (
    AudioBuffer,
    AudioContext,
    AudioContextProvider,
    AudioDecodeError,
    decode_audio_data,
    decode_base64,
    encode_pcm16,
)
from .evaluation import EvaluationService
from .genai_client import CredentialProvider, GenAiClientFactory
from .history_store import HistoryStore
from .lesson_generator import LessonGenerator
from .media_store import MediaStore, MediaStoreError
from .operation_poller import OperationTimeoutError, poll_until_done
from .response_contract import ResponseContractError, validate_feedback_payload
from .session_state import OperationInProgressError, SessionState, needs_credential_reselection
from .speech_synthesis import SpeechSynthesisError, SpeechSynthesisService
from .video_generation import (
    VideoGenerationError,
    VideoGenerationService,
    VideoGenerationTimeout,
)

__all__ = [
    "AudioBuffer",
    "AudioContext",
    "AudioContextProvider",
    "AudioDecodeError",
    "decode_audio_data",
    "decode_base64",
    "encode_pcm16",
    "EvaluationService",
    "CredentialProvider",
    "GenAiClientFactory",
    "HistoryStore",
    "LessonGenerator",
    "MediaStore",
    "MediaStoreError",
    "OperationTimeoutError",
    "poll_until_done",
    "ResponseContractError",
    "validate_feedback_payload",
    "OperationInProgressError",
    "SessionState",
    "needs_credential_reselection",
    "SpeechSynthesisError",
    "SpeechSynthesisService",
    "VideoGenerationError",
    "VideoGenerationService",
    "VideoGenerationTimeout",
]
