from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventstay.models import Payment


async def find_by_ticket_id(db: AsyncSession, ticket_id: int) -> Optional[Payment]:
    result = await db.execute(
        select(Payment)
        .where(Payment.ticket_id == ticket_id)
        .order_by(Payment.id.desc())
        .limit(1)
    )
    return result.scalar_one_or_none()


async def create(db: AsyncSession, payment_data: dict) -> Payment:
    payment = Payment(**payment_data)
    db.add(payment)
    await db.flush()
    await db.refresh(payment)
    return payment
