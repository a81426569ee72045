from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventstay.models import Enrollment


async def find_by_user_id(db: AsyncSession, user_id: int) -> Optional[Enrollment]:
    result = await db.execute(select(Enrollment).where(Enrollment.user_id == user_id))
    return result.scalar_one_or_none()


async def find_by_id(db: AsyncSession, enrollment_id: int) -> Optional[Enrollment]:
    result = await db.execute(select(Enrollment).where(Enrollment.id == enrollment_id))
    return result.scalar_one_or_none()


async def upsert(db: AsyncSession, user_id: int, fields: dict) -> Enrollment:
    """Create the user's enrollment, or overwrite the fields of the existing one."""
    enrollment = await find_by_user_id(db, user_id)
    if enrollment is None:
        enrollment = Enrollment(user_id=user_id, **fields)
        db.add(enrollment)
    else:
        for name, value in fields.items():
            setattr(enrollment, name, value)

    await db.flush()
    await db.refresh(enrollment)
    return enrollment
