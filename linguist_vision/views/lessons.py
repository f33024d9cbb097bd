"""Schemas for lesson generation requests and responses."""

from pydantic import BaseModel, ConfigDict, Field

from linguist_vision.domain.models import Difficulty, MediaKind


class LessonRequest(BaseModel):
    """Request schema for starting a lesson round."""

    topic: str = Field("Business Analysis", min_length=1, description="Scene topic")
    difficulty: Difficulty = Field(Difficulty.INTERMEDIATE, description="Learner level")
    media_kind: MediaKind = Field(MediaKind.IMAGE, description="Generate an image or a video")


class LessonPromptResponse(BaseModel):
    """A generated scene the learner should describe."""

    id: str
    media_kind: MediaKind
    resource_locator: str = Field(
        ..., description="Data URI or media URL; empty when no media was produced"
    )
    description_text: str
    topic: str
    difficulty: Difficulty

    model_config = ConfigDict(from_attributes=True)
