"""Domain models for lesson rounds, feedback and session history."""

import secrets
import string
import time
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_LENGTH = 9


def new_short_id() -> str:
    """Return a short random base36 identifier."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


def now_ms() -> int:
    return int(time.time() * 1000)


class Difficulty(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class MediaKind(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


class LessonPrompt(BaseModel):
    """One generated scene the learner is asked to describe."""

    id: str = Field(default_factory=new_short_id)
    media_kind: MediaKind
    resource_locator: str = ""
    description_text: str
    topic: str
    difficulty: Difficulty

    model_config = ConfigDict(frozen=True)

    @property
    def has_media(self) -> bool:
        # An empty locator means the media call produced nothing.
        return bool(self.resource_locator)


class Correction(BaseModel):
    original: str
    correction: str
    explanation: str

    model_config = ConfigDict(frozen=True)


class Feedback(BaseModel):
    """Evaluation of a learner description."""

    score: float
    corrections: List[Correction] = Field(default_factory=list)
    vocabulary_suggestions: List[str] = Field(default_factory=list)
    overall_comment: str
    model_sample_description: str

    model_config = ConfigDict(frozen=True)

    @field_validator("score")
    @classmethod
    def clamp_score(cls, value: float) -> float:
        return max(0.0, min(100.0, float(value)))


class HistoryItem(BaseModel):
    """A finished round: the prompt, what the learner wrote, and the feedback."""

    id: str = Field(default_factory=new_short_id)
    prompt: LessonPrompt
    user_description: str
    feedback: Feedback
    timestamp: int = Field(default_factory=now_ms)

    model_config = ConfigDict(frozen=True)

    @property
    def word_count(self) -> int:
        return count_words(self.user_description)


def count_words(text: str) -> int:
    stripped = text.strip()
    if not stripped:
        return 0
    return len(stripped.split())
