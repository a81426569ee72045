"""
Pydantic schemas for hotels and rooms.
"""

from pydantic import BaseModel


class RoomResponse(BaseModel):
    id: int
    name: str
    capacity: int
    hotel_id: int

    model_config = {"from_attributes": True}


class HotelResponse(BaseModel):
    id: int
    name: str
    image: str

    model_config = {"from_attributes": True}


class HotelWithRoomsResponse(HotelResponse):
    rooms: list[RoomResponse]
