"""In-flight flags for the single interactive tutoring session."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

# Error text the service returns when the selected key no longer resolves.
CREDENTIAL_RESELECT_SIGNATURE = "Requested entity was not found"


class OperationInProgressError(RuntimeError):
    """Raised when a round or playback starts while another one is in flight."""


def needs_credential_reselection(exc: BaseException) -> bool:
    return CREDENTIAL_RESELECT_SIGNATURE in str(exc)


class SessionState:
    """Loading and playback flags, reset on every exit path."""

    def __init__(self) -> None:
        self._loading = False
        self._status_message = ""
        self._playing_audio = False

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def status_message(self) -> str:
        return self._status_message

    @property
    def is_playing_audio(self) -> bool:
        return self._playing_audio

    @asynccontextmanager
    async def loading(self, status_message: str) -> AsyncIterator[None]:
        if self._loading:
            raise OperationInProgressError(
                f"Another operation is in progress: {self._status_message}"
            )
        self._loading = True
        self._status_message = status_message
        try:
            yield
        finally:
            self._loading = False
            self._status_message = ""

    @asynccontextmanager
    async def playing_audio(self) -> AsyncIterator[None]:
        if self._playing_audio:
            raise OperationInProgressError("Audio is already playing.")
        self._playing_audio = True
        try:
            yield
        finally:
            self._playing_audio = False


__all__ = [
    "CREDENTIAL_RESELECT_SIGNATURE",
    "OperationInProgressError",
    "SessionState",
    "needs_credential_reselection",
]
