"""Pydantic schemas used as views in the MVC architecture."""

from .catalog import CatalogResponse, SessionStatusResponse
from .common import ErrorResponse
from .evaluations import CorrectionView, EvaluationRequest, FeedbackView, HistoryItemResponse
from .lessons import LessonPromptResponse, LessonRequest
from .speech import SpeechRequest

__all__ = [
    "CatalogResponse",
    "SessionStatusResponse",
    "ErrorResponse",
    "CorrectionView",
    "EvaluationRequest",
    "FeedbackView",
    "HistoryItemResponse",
    "LessonPromptResponse",
    "LessonRequest",
    "SpeechRequest",
]
