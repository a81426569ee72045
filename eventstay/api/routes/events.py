"""
Current event endpoint, cached in Redis.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from eventstay.db.session import get_db
from eventstay.schemas.event import EventResponse
from eventstay.services.event_service import get_current_event
from eventstay.services.cache_service import get_cached_event, set_cached_event
from eventstay.core.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/event", tags=["Event"])


@router.get("", response_model=EventResponse)
async def get_event_endpoint(db: AsyncSession = Depends(get_db)):
    """Public details of the current event."""
    cached = await get_cached_event()
    if cached:
        logger.info("event_cache_hit")
        return EventResponse(**cached)

    event = await get_current_event(db)
    response = EventResponse.model_validate(event)
    await set_cached_event(response.model_dump(mode="json"))
    return response
