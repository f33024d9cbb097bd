"""Session history endpoints."""

from fastapi import APIRouter, HTTPException, status

from linguist_vision.config.dependencies import RuntimeDep
from linguist_vision.views import HistoryItemResponse

router = APIRouter(prefix="/history", tags=["history"])


@router.get("/", response_model=list[HistoryItemResponse])
async def list_history(runtime: RuntimeDep) -> list[HistoryItemResponse]:
    """Return finished rounds, most recent first."""

    return [HistoryItemResponse.model_validate(item) for item in runtime.history.items()]


@router.get("/{item_id}", response_model=HistoryItemResponse)
async def select_history_item(item_id: str, runtime: RuntimeDep) -> HistoryItemResponse:
    """Return a past round and make its prompt the current lesson."""

    item = runtime.history.select(item_id)
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="History item not found",
        )
    return HistoryItemResponse.model_validate(item)
