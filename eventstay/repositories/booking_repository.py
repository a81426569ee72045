from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from eventstay.models import Booking


async def create(db: AsyncSession, room_id: int, user_id: int) -> Booking:
    booking = Booking(room_id=room_id, user_id=user_id)
    db.add(booking)
    await db.flush()
    await db.refresh(booking)
    return booking


async def find_by_user_id(db: AsyncSession, user_id: int) -> Optional[Booking]:
    """The user's booking with its Room loaded."""
    result = await db.execute(
        select(Booking)
        .options(selectinload(Booking.room))
        .where(Booking.user_id == user_id)
    )
    return result.scalar_one_or_none()


async def find_by_room_id(db: AsyncSession, room_id: int) -> list[Booking]:
    result = await db.execute(select(Booking).where(Booking.room_id == room_id))
    return list(result.scalars().all())


async def upsert(db: AsyncSession, booking_id: int, room_id: int, user_id: int) -> Booking:
    """Write the booking keyed by id: update it if the row exists, insert it otherwise."""
    booking = await db.merge(Booking(id=booking_id, room_id=room_id, user_id=user_id))
    await db.flush()
    await db.refresh(booking)
    return booking
