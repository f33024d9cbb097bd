"""Lesson round pipeline package.

Modules follow the order of one round:

1. `generation` – scene description plus image or polled video.
2. `evaluation` – schema-validated feedback, appended to history.
3. `synthesis` – model answer speech decoded to WAV.
4. `flow` – human-readable description of the stages.

Controllers import from here and stay free of service wiring.
"""

from .errors import TutorHTTPException
from .evaluation import submit_description
from .flow import LessonRoundPipeline, PipelineStage
from .generation import start_lesson
from .synthesis import synthesize_model_answer

__all__ = [
    "LessonRoundPipeline",
    "PipelineStage",
    "TutorHTTPException",
    "start_lesson",
    "submit_description",
    "synthesize_model_answer",
]
