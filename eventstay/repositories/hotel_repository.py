from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from eventstay.models import Hotel


async def find_hotels(db: AsyncSession) -> list[Hotel]:
    result = await db.execute(select(Hotel).order_by(Hotel.id))
    return list(result.scalars().all())


async def find_with_rooms_by_id(db: AsyncSession, hotel_id: int) -> Optional[Hotel]:
    result = await db.execute(
        select(Hotel)
        .options(selectinload(Hotel.rooms))
        .where(Hotel.id == hotel_id)
    )
    return result.scalar_one_or_none()
