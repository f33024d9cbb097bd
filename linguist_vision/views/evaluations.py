"""Schemas for learner submissions, feedback and history entries."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .lessons import LessonPromptResponse


class EvaluationRequest(BaseModel):
    """The learner's written description of the current scene."""

    user_description: str = Field(..., description="Free text written by the learner")

    @field_validator("user_description")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Description must not be empty")
        return value


class CorrectionView(BaseModel):
    original: str
    correction: str
    explanation: str

    model_config = ConfigDict(from_attributes=True)


class FeedbackView(BaseModel):
    score: float = Field(..., ge=0, le=100)
    corrections: List[CorrectionView]
    vocabulary_suggestions: List[str]
    overall_comment: str
    model_sample_description: str

    model_config = ConfigDict(from_attributes=True)


class HistoryItemResponse(BaseModel):
    """One finished round."""

    id: str
    prompt: LessonPromptResponse
    user_description: str
    feedback: FeedbackView
    timestamp: int = Field(..., description="Creation time in epoch milliseconds")
    word_count: int = 0

    model_config = ConfigDict(from_attributes=True)
