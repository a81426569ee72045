from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventstay.models import Room


async def find_by_id(db: AsyncSession, room_id: int, for_update: bool = False) -> Optional[Room]:
    """
    Fetch a room. With for_update=True the row stays locked (SELECT ... FOR UPDATE)
    until the surrounding transaction ends, so concurrent bookings of the same
    room serialise on it.
    """
    query = select(Room).where(Room.id == room_id)
    if for_update:
        query = query.with_for_update()
    result = await db.execute(query)
    return result.scalar_one_or_none()
