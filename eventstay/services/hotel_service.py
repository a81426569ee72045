"""
Hotel listing for enrolled users holding a paid, in-person ticket with hotel.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from eventstay.core.errors import CannotListHotelsError, NotFoundError
from eventstay.core.logging import get_logger
from eventstay.models import Hotel, TicketStatus
from eventstay.repositories import enrollment_repository, hotel_repository, ticket_repository

logger = get_logger(__name__)


async def check_hotel_access(db: AsyncSession, user_id: int) -> None:
    enrollment = await enrollment_repository.find_by_user_id(db, user_id)
    if not enrollment:
        raise NotFoundError("Enrollment not found")

    ticket = await ticket_repository.find_by_enrollment_id(db, enrollment.id)
    if (
        not ticket
        or ticket.status != TicketStatus.PAID
        or ticket.ticket_type.is_remote
        or not ticket.ticket_type.includes_hotel
    ):
        logger.info("hotel_listing_denied", user_id=user_id)
        raise CannotListHotelsError()


async def get_hotels(db: AsyncSession, user_id: int) -> list[Hotel]:
    await check_hotel_access(db, user_id)

    hotels = await hotel_repository.find_hotels(db)
    if not hotels:
        raise NotFoundError("No hotels available")
    return hotels


async def get_hotel_with_rooms(db: AsyncSession, user_id: int, hotel_id: int) -> Hotel:
    await check_hotel_access(db, user_id)

    hotel = await hotel_repository.find_with_rooms_by_id(db, hotel_id)
    if not hotel:
        raise NotFoundError(f"Hotel {hotel_id} not found")
    return hotel
