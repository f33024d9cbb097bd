"""Helpers to construct the prompts sent to the generative model.

Three prompts drive a lesson round:
* A scene prompt asking for one vivid visual sentence on a topic.
* An evaluation prompt comparing the learner's text with that scene.
* A speech prompt wrapping the model answer for text-to-speech.
"""

from __future__ import annotations

from linguist_vision.domain.models import Difficulty

BUSINESS_ANALYSIS_TOPIC = "Business Analysis"

FALLBACK_SCENE_DESCRIPTION = (
    "A professional office scene showing a business analyst working on project requirements."
)

TOPICS = (
    BUSINESS_ANALYSIS_TOPIC,
    "Daily Life",
    "Nature",
    "Cyberpunk City",
    "Space Exploration",
    "Cooking",
)

# Extra guidance injected into the scene prompt for the BA topic.
BUSINESS_ANALYSIS_RUBRIC = """Focus on professional Business Analyst activities:
1. Requirement Elicitation & Management (Backlog, User Stories, DEEP, MoSCoW, Traceability Matrix).
2. Stakeholder Management (RACI Model, Onion Diagrams, Matrix).
3. Process Flow Modeling (BPMN, Value Stream Mapping, Swim lanes).
4. Solution & Evaluation Management (KPIs, Cost-Benefit Analysis, ROI, Feasibility, Acceptance Criteria).
Describe a vivid workspace scene where a BA is presenting or analyzing one of these artifacts."""

BUSINESS_ANALYSIS_TERMS = """If the context is Business Analysis, check for correct usage of professional terms:
- Requirement Management: Backlog, Elicitation, Traceability, MoSCoW, Baseline.
- Stakeholder Management: RACI, Onion Diagram, Power/Interest Grid, Engagement.
- Process Flow: BPMN, Sequence Diagram, Value Stream, Handoffs.
- Evaluation: KPIs, ROI, NPV, Feasibility, Cost-Benefit, Acceptance Criteria."""

SPEECH_INSTRUCTION = "Say professionally: "


def topic_context(topic: str) -> str:
    """Return the rubric to inject for reserved topics, or an empty string."""
    if topic == BUSINESS_ANALYSIS_TOPIC:
        return BUSINESS_ANALYSIS_RUBRIC
    return ""


def level_context(difficulty: Difficulty) -> str:
    if difficulty is Difficulty.INTERMEDIATE:
        return "B1 level (CEFR). Focus on phrasal verbs and descriptive adjectives."
    return f"{difficulty.value} level."


def build_scene_prompt(topic: str, difficulty: Difficulty) -> str:
    lines = [
        f"Generate a detailed, single-sentence visual prompt for an English learner at {difficulty.value} level.",
        f'The topic is "{topic}".',
    ]
    context = topic_context(topic)
    if context:
        lines.append(context)
    lines.extend(
        [
            "Make it vivid, full of details, and suitable for a long description (up to 500 words).",
            "Do not include any other text, just the prompt.",
        ]
    )
    return "\n".join(lines)


def build_evaluation_prompt(
    user_description: str,
    original_prompt: str,
    difficulty: Difficulty,
) -> str:
    return "\n".join(
        [
            "Evaluate the following English description of a visual prompt.",
            f"Visual Context: {original_prompt}",
            f"User Description: {user_description}",
            f"Target Level: {level_context(difficulty)}",
            "",
            BUSINESS_ANALYSIS_TERMS,
            "",
            "The goal is to help the user reach a mastery of up to 500 words.",
            "",
            'Provide a "Model Sample Description" that is a polished, native-level version '
            "using rich Business Analysis terminology.",
            "",
            "Provide feedback strictly in JSON format.",
        ]
    )


def build_speech_prompt(text: str) -> str:
    return f"{SPEECH_INSTRUCTION}{text}"


def resolve_scene_description(generated: str | None) -> str:
    """Never hand an empty prompt to the media models."""
    text = (generated or "").strip()
    return text or FALLBACK_SCENE_DESCRIPTION


__all__ = [
    "BUSINESS_ANALYSIS_TOPIC",
    "FALLBACK_SCENE_DESCRIPTION",
    "TOPICS",
    "build_evaluation_prompt",
    "build_scene_prompt",
    "build_speech_prompt",
    "level_context",
    "resolve_scene_description",
    "topic_context",
]
