"""Application configuration."""

from .settings import GeminiConfig, GeminiCredentials, Settings, settings

__all__ = ["GeminiConfig", "GeminiCredentials", "Settings", "settings"]
