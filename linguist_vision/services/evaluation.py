"""Evaluate a learner description with a schema-constrained model call."""

from __future__ import annotations

import logging

from google.genai import types

from linguist_vision.config.settings import GeminiConfig
from linguist_vision.domain.models import Difficulty, Feedback
from linguist_vision.services.genai_client import GenAiClientFactory
from linguist_vision.services.prompt_builder import build_evaluation_prompt
from linguist_vision.services.response_contract import ResponseContractError, validate_feedback_payload

logger = logging.getLogger("linguist_vision.services.lesson_pipeline")

EVALUATION_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "score": types.Schema(type=types.Type.NUMBER),
        "corrections": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "original": types.Schema(type=types.Type.STRING),
                    "correction": types.Schema(type=types.Type.STRING),
                    "explanation": types.Schema(type=types.Type.STRING),
                },
                required=["original", "correction", "explanation"],
            ),
        ),
        "vocabularySuggestions": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(type=types.Type.STRING),
            description="Provide at least 5 relevant Business Analysis or professional vocabulary words.",
        ),
        "overallComment": types.Schema(type=types.Type.STRING),
        "modelSampleDescription": types.Schema(
            type=types.Type.STRING,
            description="A high-quality, 150-300 word version of the description using advanced BA terminology.",
        ),
    },
    required=[
        "score",
        "corrections",
        "vocabularySuggestions",
        "overallComment",
        "modelSampleDescription",
    ],
)


class EvaluationService:
    """Score a learner's text against the scene it describes."""

    def __init__(self, client_factory: GenAiClientFactory, config: GeminiConfig) -> None:
        self._client_factory = client_factory
        self._config = config

    async def evaluate(
        self,
        user_description: str,
        original_prompt: str,
        difficulty: Difficulty,
    ) -> Feedback:
        client = self._client_factory()
        response = await client.aio.models.generate_content(
            model=self._config.text_model,
            contents=build_evaluation_prompt(user_description, original_prompt, difficulty),
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=EVALUATION_RESPONSE_SCHEMA,
            ),
        )

        validation = validate_feedback_payload(getattr(response, "text", None))
        if not validation.ok:
            logger.warning("Evaluation contract rejected: %s", validation.error)
            raise ResponseContractError(validation.error or "Invalid evaluation response.")

        feedback = validation.unwrap()
        logger.info(
            "Evaluation difficulty=%s score=%.1f corrections=%s",
            difficulty.value,
            feedback.score,
            len(feedback.corrections),
        )
        return feedback


__all__ = ["EVALUATION_RESPONSE_SCHEMA", "EvaluationService"]
