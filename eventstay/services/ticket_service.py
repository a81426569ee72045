"""
Ticket types and ticket issuance.

An enrollment holds at most one ticket (unique key on tickets.enrollment_id);
reserving a second one is a ConflictError, not a replacement.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eventstay.core.errors import ConflictError, NotFoundError
from eventstay.core.logging import get_logger
from eventstay.models import Ticket, TicketStatus, TicketType
from eventstay.repositories import enrollment_repository, ticket_repository

logger = get_logger(__name__)


async def get_ticket_types(db: AsyncSession) -> list[TicketType]:
    return await ticket_repository.find_ticket_types(db)


async def get_ticket_by_user_id(db: AsyncSession, user_id: int) -> Ticket:
    enrollment = await enrollment_repository.find_by_user_id(db, user_id)
    if not enrollment:
        raise NotFoundError("Enrollment not found")

    ticket = await ticket_repository.find_by_enrollment_id(db, enrollment.id)
    if not ticket:
        raise NotFoundError("Ticket not found")
    return ticket


async def create_ticket(db: AsyncSession, user_id: int, ticket_type_id: int) -> Ticket:
    """Reserve a ticket of the given type for the user's enrollment."""
    enrollment = await enrollment_repository.find_by_user_id(db, user_id)
    if not enrollment:
        raise NotFoundError("Enrollment not found")

    if not await ticket_repository.find_ticket_type_by_id(db, ticket_type_id):
        raise NotFoundError(f"Ticket type {ticket_type_id} not found")

    if await ticket_repository.find_by_enrollment_id(db, enrollment.id):
        logger.info("ticket_rejected_already_reserved", user_id=user_id, enrollment_id=enrollment.id)
        raise ConflictError("Enrollment already has a ticket")

    try:
        ticket = await ticket_repository.create(
            db,
            ticket_type_id=ticket_type_id,
            enrollment_id=enrollment.id,
            status=TicketStatus.RESERVED,
        )
    except IntegrityError:
        # Concurrent reservation for the same enrollment committed first
        logger.warning("ticket_rejected_duplicate_enrollment", user_id=user_id, enrollment_id=enrollment.id)
        raise ConflictError("Enrollment already has a ticket")

    logger.info("ticket_reserved", ticket_id=ticket.id, user_id=user_id, ticket_type_id=ticket_type_id)
    return ticket
