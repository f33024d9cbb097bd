"""Domain models shared by services and views."""

from .models import (
    Correction,
    Difficulty,
    Feedback,
    HistoryItem,
    LessonPrompt,
    MediaKind,
    count_words,
    new_short_id,
)

__all__ = [
    "Correction",
    "Difficulty",
    "Feedback",
    "HistoryItem",
    "LessonPrompt",
    "MediaKind",
    "count_words",
    "new_short_id",
]
