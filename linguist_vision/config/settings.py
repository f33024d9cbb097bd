from typing import Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiCredentials(BaseSettings):
    """Service credential, read fresh on every call."""

    api_key: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY", "GOOGLE_API_KEY"),
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        secrets_dir=".secrets",
        case_sensitive=False,
        extra="ignore",
    )


class GeminiConfig(BaseSettings):
    """Generative AI model and request configuration."""

    text_model: str = "gemini-3-flash-preview"
    image_model: str = "gemini-2.5-flash-image"
    video_model: str = "veo-3.1-fast-generate-preview"
    tts_model: str = "gemini-2.5-flash-preview-tts"
    voice_name: str = "Kore"
    aspect_ratio: str = "16:9"
    video_resolution: str = "720p"
    poll_interval_seconds: float = Field(default=10.0, gt=0)
    video_max_wait_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Overall limit for a video job; unset means wait indefinitely.",
    )
    download_timeout_seconds: float = Field(default=120.0, gt=0)
    tts_sample_rate: int = Field(default=24000, ge=8000, le=48000)
    tts_channels: int = Field(default=1, ge=1, le=2)

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Application settings"""

    app_name: str = "LinguistVision Tutor"
    app_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    log_file: str = "logs/app.log"
    lesson_log_file: str = "logs/lesson_pipeline.log"
    word_limit: int = 500
    media_cache_size: int = Field(default=20, ge=1, description="Downloaded videos kept in memory")

    # Gemini
    gemini: GeminiConfig = Field(default_factory=GeminiConfig)

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
