"""In-memory store that makes downloaded media addressable by URL."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import uuid4

logger = logging.getLogger(__name__)


class MediaStoreError(RuntimeError):
    """Raised when a media payload cannot be stored."""


@dataclass(frozen=True)
class StoredMedia:
    media_id: str
    data: bytes
    content_type: str


class MediaStore:
    """Blob store behind object-style URLs.

    Holds at most ``max_items`` payloads; the oldest one is dropped first.
    """

    def __init__(self, url_prefix: str = "/media", max_items: int = 20) -> None:
        if max_items < 1:
            raise ValueError("max_items must be at least 1")
        self._url_prefix = url_prefix.rstrip("/")
        self._max_items = max_items
        self._items: dict[str, StoredMedia] = {}

    def put(self, data: bytes, *, content_type: str) -> str:
        """Store ``data`` and return the URL it is served from."""

        if not data:
            raise MediaStoreError("Media payload for storage was empty.")
        media_id = uuid4().hex
        self._items[media_id] = StoredMedia(media_id=media_id, data=data, content_type=content_type)
        while len(self._items) > self._max_items:
            evicted = next(iter(self._items))
            del self._items[evicted]
            logger.info("Evicted media id=%s", evicted)
        return self.url_for(media_id)

    def get(self, media_id: str) -> StoredMedia | None:
        return self._items.get(media_id)

    def url_for(self, media_id: str) -> str:
        return f"{self._url_prefix}/{media_id}"

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["MediaStore", "MediaStoreError", "StoredMedia"]
