"""
Booking service: hotel room reservation for enrolled users.

RULES
=====

Eligibility (check_enrollment_ticket):
  The user needs an enrollment, a ticket for it, the ticket must be PAID and
  its type must include a hotel. Every failure is a CannotBookError; callers
  are not meant to tell "no enrollment" from "unpaid ticket".

Capacity (check_valid_booking):
  The room must exist (NotFoundError) and hold fewer bookings than its
  capacity. A room with capacity 3 accepts while it has 0, 1 or 2 bookings
  and rejects at 3.

One booking per user:
  book_room rejects users who already hold a booking; changing rooms rewrites
  the existing row in place (upsert by booking id). The unique key on
  bookings.user_id backs this up for concurrent first bookings.

CONCURRENCY
===========

Counting bookings and then inserting is a check-then-act sequence: two
requests for the last free bed can both count capacity - 1 and both insert.

  The capacity check reads the room with SELECT ... FOR UPDATE. The lock is
  held until the request transaction commits (see eventstay.db.session), so a
  second booking of the same room waits, then counts the first one's row.
  Requests for different rooms never contend.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eventstay.core.errors import BadRequestError, CannotBookError, NotFoundError
from eventstay.core.logging import get_logger
from eventstay.models import Booking, TicketStatus
from eventstay.repositories import (
    booking_repository,
    enrollment_repository,
    room_repository,
    ticket_repository,
)

logger = get_logger(__name__)


def validate_room_id(room_id) -> None:
    """room_id must be a positive integer; checked before any lookup."""
    if room_id is None or isinstance(room_id, bool) or not isinstance(room_id, int) or room_id <= 0:
        raise BadRequestError("roomId must be a positive integer")


async def check_enrollment_ticket(db: AsyncSession, user_id: int) -> None:
    enrollment = await enrollment_repository.find_by_user_id(db, user_id)
    if not enrollment:
        logger.info("booking_ineligible", user_id=user_id, reason="no_enrollment")
        raise CannotBookError()

    ticket = await ticket_repository.find_by_enrollment_id(db, enrollment.id)
    if not ticket:
        logger.info("booking_ineligible", user_id=user_id, reason="no_ticket")
        raise CannotBookError()

    if ticket.status != TicketStatus.PAID or not ticket.ticket_type.includes_hotel:
        logger.info(
            "booking_ineligible",
            user_id=user_id,
            reason="ticket_not_eligible",
            ticket_status=ticket.status,
            includes_hotel=ticket.ticket_type.includes_hotel,
        )
        raise CannotBookError()


async def check_valid_booking(db: AsyncSession, room_id: int) -> None:
    room = await room_repository.find_by_id(db, room_id, for_update=True)
    if not room:
        raise NotFoundError(f"Room {room_id} not found")

    bookings = await booking_repository.find_by_room_id(db, room_id)
    if len(bookings) >= room.capacity:
        logger.warning(
            "booking_rejected_room_full",
            room_id=room_id,
            capacity=room.capacity,
            occupied=len(bookings),
        )
        raise CannotBookError("Room is fully booked")


async def book_room(db: AsyncSession, user_id: int, room_id: int) -> Booking:
    validate_room_id(room_id)

    await check_enrollment_ticket(db, user_id)

    if await booking_repository.find_by_user_id(db, user_id):
        logger.info("booking_rejected_already_booked", user_id=user_id)
        raise CannotBookError("User already has a booking")

    await check_valid_booking(db, room_id)

    try:
        booking = await booking_repository.create(db, room_id=room_id, user_id=user_id)
    except IntegrityError:
        # Lost the race against a concurrent first booking by the same user
        logger.warning("booking_rejected_duplicate_user", user_id=user_id, room_id=room_id)
        raise CannotBookError("User already has a booking")

    logger.info("booking_created", booking_id=booking.id, user_id=user_id, room_id=room_id)
    return booking


async def get_booking(db: AsyncSession, user_id: int) -> Booking:
    booking = await booking_repository.find_by_user_id(db, user_id)
    if not booking:
        raise NotFoundError("Booking not found")
    return booking


async def change_booking_room(db: AsyncSession, user_id: int, room_id: int) -> Booking:
    """
    Move the user's booking to another room.
    Eligibility is not re-checked: holding a booking already implies it.
    """
    validate_room_id(room_id)

    await check_valid_booking(db, room_id)

    booking = await booking_repository.find_by_user_id(db, user_id)
    if not booking:
        raise CannotBookError("User has no booking to change")

    previous_room_id = booking.room_id
    updated = await booking_repository.upsert(
        db,
        booking_id=booking.id,
        room_id=room_id,
        user_id=user_id,
    )

    logger.info(
        "booking_room_changed",
        booking_id=updated.id,
        user_id=user_id,
        from_room_id=previous_room_id,
        to_room_id=room_id,
    )
    return updated
