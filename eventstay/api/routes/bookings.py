"""
Booking endpoints: reserve a room, read the current booking, change rooms.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from eventstay.db.session import get_db
from eventstay.schemas.booking import BookingRequest, BookingResponse, BookingIdResponse
from eventstay.services.booking_service import book_room, change_booking_room, get_booking
from eventstay.core.errors import DomainError
from eventstay.core.metrics import booking_latency, record_booking_attempt
from eventstay.core.security import get_current_user_id

router = APIRouter(prefix="/booking", tags=["Booking"])


@router.get("", response_model=BookingResponse)
async def get_user_booking(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """The authenticated user's booking, with its room."""
    return await get_booking(db, user_id)


@router.post("", response_model=BookingIdResponse)
async def create_booking(
    booking_data: BookingRequest,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    Book a room. The user needs a paid ticket that includes a hotel and the
    room must have a free place.
    """
    with booking_latency.labels(operation="book").time():
        try:
            booking = await book_room(db, user_id, booking_data.room_id)
        except DomainError:
            record_booking_attempt("book", "rejected")
            raise
    record_booking_attempt("book", "success")
    return BookingIdResponse(booking_id=booking.id)


@router.put("", response_model=BookingIdResponse)
async def change_booking(
    booking_data: BookingRequest,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Move the user's existing booking to another room."""
    with booking_latency.labels(operation="change").time():
        try:
            booking = await change_booking_room(db, user_id, booking_data.room_id)
        except DomainError:
            record_booking_attempt("change", "rejected")
            raise
    record_booking_attempt("change", "success")
    return BookingIdResponse(booking_id=booking.id)
