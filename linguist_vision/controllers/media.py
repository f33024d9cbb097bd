"""Serve downloaded lesson media."""

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response

from linguist_vision.config.dependencies import RuntimeDep

router = APIRouter(prefix="/media", tags=["media"])


@router.get("/{media_id}", response_class=Response)
async def get_media(media_id: str, runtime: RuntimeDep) -> Response:
    stored = runtime.media_store.get(media_id)
    if stored is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Media not found",
        )
    return Response(content=stored.data, media_type=stored.content_type)
