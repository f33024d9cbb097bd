"""HTTP errors raised by the lesson pipeline stages."""

from __future__ import annotations

from fastapi import HTTPException


class TutorHTTPException(HTTPException):
    """HTTPException carrying a machine-readable ``code`` for the client."""

    def __init__(self, status_code: int, detail: str, code: str | None = None) -> None:
        super().__init__(status_code=status_code, detail=detail)
        self.code = code


__all__ = ["TutorHTTPException"]
