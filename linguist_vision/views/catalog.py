"""Schemas describing lesson options and session status."""

from typing import List

from pydantic import BaseModel

from linguist_vision.domain.models import Difficulty, MediaKind


class CatalogResponse(BaseModel):
    topics: List[str]
    difficulties: List[Difficulty]
    media_kinds: List[MediaKind]
    word_limit: int
    stages: List[str]


class SessionStatusResponse(BaseModel):
    is_loading: bool
    status_message: str
    is_playing_audio: bool
    has_api_key: bool
    history_size: int
