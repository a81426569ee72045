"""
Hotel listing for users whose ticket includes a hotel.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from eventstay.db.session import get_db
from eventstay.core.security import get_current_user_id
from eventstay.schemas.hotel import HotelResponse, HotelWithRoomsResponse
from eventstay.services.hotel_service import get_hotels, get_hotel_with_rooms

router = APIRouter(prefix="/hotels", tags=["Hotels"])


@router.get("", response_model=list[HotelResponse])
async def list_hotels(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await get_hotels(db, user_id)


@router.get("/{hotel_id}", response_model=HotelWithRoomsResponse)
async def get_hotel(
    hotel_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await get_hotel_with_rooms(db, user_id, hotel_id)
