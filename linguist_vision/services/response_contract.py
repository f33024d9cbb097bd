"""Pydantic models for validating the evaluation JSON returned by the model.

The evaluation call asks Gemini for a strict JSON object; this module turns
that text into a typed ``Feedback`` or an explicit failure, so downstream code
never sees a half-populated result.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError

from linguist_vision.domain.models import Correction, Feedback


class ResponseContractError(RuntimeError):
    """Raised when the evaluation response contract cannot be validated."""


class CorrectionPayload(BaseModel):
    original: str
    correction: str
    explanation: str


class EvaluationPayload(BaseModel):
    score: float
    corrections: List[CorrectionPayload]
    vocabulary_suggestions: List[str] = Field(alias="vocabularySuggestions")
    overall_comment: str = Field(alias="overallComment")
    model_sample_description: str = Field(alias="modelSampleDescription")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    def to_feedback(self) -> Feedback:
        return Feedback(
            score=self.score,
            corrections=[
                Correction(
                    original=item.original,
                    correction=item.correction,
                    explanation=item.explanation,
                )
                for item in self.corrections
            ],
            vocabulary_suggestions=list(self.vocabulary_suggestions),
            overall_comment=self.overall_comment,
            model_sample_description=self.model_sample_description,
        )


@dataclass(frozen=True)
class FeedbackValidation:
    """Outcome of validating one evaluation response."""

    feedback: Optional[Feedback] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.feedback is not None

    def unwrap(self) -> Feedback:
        if self.feedback is None:
            raise ResponseContractError(self.error or "Invalid evaluation response.")
        return self.feedback


def validate_feedback_payload(payload: str | None) -> FeedbackValidation:
    """Parse and validate raw model text into ``Feedback``."""

    cleaned = _clean_json_payload(payload or "")
    if not cleaned:
        return FeedbackValidation(error="Evaluation response was empty.")

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        return FeedbackValidation(error=f"Evaluation response is not JSON: {exc}")

    if not isinstance(data, dict):
        return FeedbackValidation(error="Evaluation response is not a JSON object.")

    try:
        parsed = EvaluationPayload.model_validate(data)
    except ValidationError as exc:
        missing = [
            ".".join(str(part) for part in err["loc"])
            for err in exc.errors()
            if err["type"] == "missing"
        ]
        if missing:
            return FeedbackValidation(
                error=f"Evaluation response is missing fields: {', '.join(missing)}"
            )
        return FeedbackValidation(error=f"Evaluation response has invalid fields: {exc}")

    return FeedbackValidation(feedback=parsed.to_feedback())


def _clean_json_payload(payload: str) -> str:
    """Strip Markdown code blocks and find the first/last brace to extract JSON."""
    if not payload:
        return ""

    cleaned = payload.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[7:]
    elif cleaned.startswith("```"):
        cleaned = cleaned[3:]

    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]

    cleaned = cleaned.strip()

    start = cleaned.find("{")
    end = cleaned.rfind("}")

    if start != -1 and end != -1 and end > start:
        cleaned = cleaned[start : end + 1]

    return cleaned


__all__ = [
    "CorrectionPayload",
    "EvaluationPayload",
    "FeedbackValidation",
    "ResponseContractError",
    "validate_feedback_payload",
]
