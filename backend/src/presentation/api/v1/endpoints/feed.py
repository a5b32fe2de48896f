"""Home feed endpoint."""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from application.use_cases import GetFeedUseCase
from infrastructure.config import Settings, get_settings, get_logger
from presentation.api.v1.dependencies import get_feed_use_case
from presentation.schemas import FeedResponse, feed_item_to_response

router = APIRouter(prefix="/feed", tags=["feed"])
logger = get_logger(__name__)


@router.get("", response_model=FeedResponse)
async def get_feed(
    limit: Optional[int] = Query(None, ge=1, description="Items fetched per source"),
    use_case: GetFeedUseCase = Depends(get_feed_use_case),
    settings: Settings = Depends(get_settings),
) -> FeedResponse:
    """Seeker profiles and listings interleaved, seekers first."""
    limit = min(limit or settings.feed_default_limit, settings.feed_max_limit)
    try:
        items = await use_case.execute(limit)
    except Exception as e:
        logger.error(f"Feed error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Akış yüklenemedi")

    return FeedResponse(items=[feed_item_to_response(item) for item in items])
