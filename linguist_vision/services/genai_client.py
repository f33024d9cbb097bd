"""Thin factory around the Google Gen AI SDK client."""

from __future__ import annotations

import logging
from typing import Any, Callable

from google import genai

from linguist_vision.config.settings import GeminiCredentials

logger = logging.getLogger(__name__)

# Sent instead of an empty key: the SDK would otherwise raise locally or pick
# up GOOGLE_API_KEY on its own, and the service must be the one to reject it.
MISSING_API_KEY = "missing-api-key"


class CredentialProvider:
    """Resolve the Gemini API key at call time.

    Keys come from ``GEMINI_API_KEY``, ``API_KEY`` or ``GOOGLE_API_KEY``, in
    that order. A missing key resolves to an empty string.
    """

    def __init__(self, static_key: str | None = None) -> None:
        self._static_key = static_key

    def get_api_key(self) -> str:
        if self._static_key is not None:
            return self._static_key
        return GeminiCredentials().api_key.get_secret_value()

    def has_api_key(self) -> bool:
        return bool(self.get_api_key())


class GenAiClientFactory:
    """Build a fresh SDK client for each call with the current credential."""

    def __init__(
        self,
        credentials: CredentialProvider,
        *,
        client_cls: Callable[..., Any] = genai.Client,
    ) -> None:
        self._credentials = credentials
        self._client_cls = client_cls

    @property
    def credentials(self) -> CredentialProvider:
        return self._credentials

    def __call__(self) -> Any:
        api_key = self._credentials.get_api_key()
        if not api_key:
            logger.warning("Gemini API key is not configured; the request will be rejected by the service")
            api_key = MISSING_API_KEY
        return self._client_cls(api_key=api_key)


__all__ = ["CredentialProvider", "GenAiClientFactory", "MISSING_API_KEY"]
