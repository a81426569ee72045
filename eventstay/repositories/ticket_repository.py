from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from eventstay.models import Ticket, TicketStatus, TicketType


async def find_ticket_types(db: AsyncSession) -> list[TicketType]:
    result = await db.execute(select(TicketType).order_by(TicketType.id))
    return list(result.scalars().all())


async def find_ticket_type_by_id(db: AsyncSession, ticket_type_id: int) -> Optional[TicketType]:
    result = await db.execute(select(TicketType).where(TicketType.id == ticket_type_id))
    return result.scalar_one_or_none()


async def find_by_enrollment_id(db: AsyncSession, enrollment_id: int) -> Optional[Ticket]:
    """Ticket of an enrollment, with its TicketType loaded."""
    result = await db.execute(
        select(Ticket)
        .options(selectinload(Ticket.ticket_type))
        .where(Ticket.enrollment_id == enrollment_id)
    )
    return result.scalar_one_or_none()


async def find_by_id(db: AsyncSession, ticket_id: int) -> Optional[Ticket]:
    result = await db.execute(select(Ticket).where(Ticket.id == ticket_id))
    return result.scalar_one_or_none()


async def find_with_type_by_id(db: AsyncSession, ticket_id: int) -> Optional[Ticket]:
    result = await db.execute(
        select(Ticket)
        .options(selectinload(Ticket.ticket_type))
        .where(Ticket.id == ticket_id)
    )
    return result.scalar_one_or_none()


async def create(
    db: AsyncSession,
    ticket_type_id: int,
    enrollment_id: int,
    status: TicketStatus,
) -> Ticket:
    ticket = Ticket(
        ticket_type_id=ticket_type_id,
        enrollment_id=enrollment_id,
        status=status.value,
    )
    db.add(ticket)
    await db.flush()
    await db.refresh(ticket, attribute_names=["ticket_type"])
    return ticket


async def mark_as_paid(db: AsyncSession, ticket_id: int) -> None:
    await db.execute(
        update(Ticket)
        .where(Ticket.id == ticket_id)
        .values(status=TicketStatus.PAID.value)
    )
