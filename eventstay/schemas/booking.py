"""
Pydantic schemas for booking-related request/response validation.
"""

from typing import Optional
from pydantic import BaseModel

from eventstay.schemas.hotel import RoomResponse


class BookingRequest(BaseModel):
    # Presence and positivity are business rules checked by the booking service
    room_id: Optional[int] = None


class BookingResponse(BaseModel):
    id: int
    room: RoomResponse

    model_config = {"from_attributes": True}


class BookingIdResponse(BaseModel):
    booking_id: int
