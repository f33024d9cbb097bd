"""LinguistVision: scene description tutoring over Gemini."""

__version__ = "1.0.0"
