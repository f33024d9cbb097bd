"""Schema for text-to-speech requests."""

from pydantic import BaseModel, Field


class SpeechRequest(BaseModel):
    text: str = Field(..., min_length=1)
