"""
Event service: the platform serves the first registered event.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventstay.models import Event
from eventstay.core.errors import NotFoundError


async def get_current_event(db: AsyncSession) -> Event:
    result = await db.execute(select(Event).order_by(Event.id.asc()).limit(1))
    event = result.scalar_one_or_none()

    if not event:
        raise NotFoundError("No event registered")
    return event
