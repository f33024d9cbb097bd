"""High-level map of one lesson round.

The controllers in ``linguist_vision/controllers`` drive the round, one HTTP
call per learner action. Steps run strictly in this order for a round:

1. ``generation`` – scene description, then the image or the video job.
2. ``evaluation`` – score the learner's text and append it to history.
3. ``synthesis`` – speak the model answer through Gemini TTS.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class PipelineStage:
    """Human-readable description of one stage in a lesson round."""

    order: int
    name: str
    module: str
    summary: str


class LessonRoundPipeline:
    """Utility wrapper documenting the lesson round flow."""

    _STAGES: List[PipelineStage] = [
        PipelineStage(
            1,
            "Scene Description",
            "linguist_vision.services.lesson_generator",
            "Ask the text model for one vivid visual sentence, falling back to a fixed scene.",
        ),
        PipelineStage(
            2,
            "Media Generation",
            "linguist_vision.services.video_generation",
            "Render an inline image, or submit a Veo job and poll it every interval until done.",
        ),
        PipelineStage(
            3,
            "Learner Input",
            "linguist_vision.controllers.evaluations",
            "Receive the learner's written description of the scene.",
        ),
        PipelineStage(
            4,
            "Evaluation",
            "linguist_vision.services.evaluation",
            "Request schema-constrained feedback and validate the JSON contract.",
        ),
        PipelineStage(
            5,
            "Model Answer Speech",
            "linguist_vision.pipelines.lesson.synthesis",
            "Synthesize PCM16 speech, decode it to float audio and return WAV.",
        ),
    ]

    @classmethod
    def describe(cls) -> Iterable[PipelineStage]:
        """Expose the ordered list of stages for debugging and documentation."""

        return tuple(cls._STAGES)


__all__ = ["LessonRoundPipeline", "PipelineStage"]
