"""
Ticket payment processing.

Card data is never persisted; a payment keeps the issuer and the last four
digits of the card number. The charged value is the ticket type's price, and a
ticket is paid once.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from eventstay.core.errors import ConflictError, NotFoundError, UnauthorizedError
from eventstay.core.logging import get_logger
from eventstay.core.metrics import payments_processed
from eventstay.models import Payment, TicketStatus
from eventstay.repositories import enrollment_repository, payment_repository, ticket_repository
from eventstay.schemas.payment import CardData

logger = get_logger(__name__)


async def check_ticket_ownership(db: AsyncSession, user_id: int, ticket_id: int) -> None:
    ticket = await ticket_repository.find_by_id(db, ticket_id)
    if not ticket:
        raise NotFoundError(f"Ticket {ticket_id} not found")

    enrollment = await enrollment_repository.find_by_id(db, ticket.enrollment_id)
    if not enrollment:
        raise NotFoundError("Enrollment not found")

    if enrollment.user_id != user_id:
        logger.warning("ticket_ownership_mismatch", ticket_id=ticket_id, user_id=user_id)
        raise UnauthorizedError("Ticket does not belong to the user")


async def get_payment_by_ticket_id(db: AsyncSession, user_id: int, ticket_id: int) -> Payment:
    await check_ticket_ownership(db, user_id, ticket_id)

    payment = await payment_repository.find_by_ticket_id(db, ticket_id)
    if not payment:
        raise NotFoundError("Payment not found")
    return payment


async def process_payment(
    db: AsyncSession,
    ticket_id: int,
    user_id: int,
    card_data: CardData,
) -> Payment:
    await check_ticket_ownership(db, user_id, ticket_id)

    ticket = await ticket_repository.find_with_type_by_id(db, ticket_id)
    if ticket.status == TicketStatus.PAID:
        logger.info("payment_rejected_already_paid", ticket_id=ticket_id, user_id=user_id)
        raise ConflictError("Ticket is already paid")

    payment = await payment_repository.create(
        db,
        {
            "ticket_id": ticket_id,
            "value": ticket.ticket_type.price,
            "card_issuer": card_data.issuer,
            "card_last_digits": str(card_data.number)[-4:],
        },
    )
    await ticket_repository.mark_as_paid(db, ticket_id)

    payments_processed.inc()
    logger.info("payment_processed", payment_id=payment.id, ticket_id=ticket_id, user_id=user_id)
    return payment
