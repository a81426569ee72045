"""
Ticket type listing and ticket reservation.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from eventstay.db.session import get_db
from eventstay.core.security import get_current_user_id
from eventstay.schemas.ticket import TicketCreate, TicketResponse, TicketTypeResponse
from eventstay.services.ticket_service import create_ticket, get_ticket_by_user_id, get_ticket_types

router = APIRouter(prefix="/tickets", tags=["Tickets"])


@router.get("/types", response_model=list[TicketTypeResponse])
async def list_ticket_types(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await get_ticket_types(db)


@router.get("", response_model=TicketResponse)
async def get_user_ticket(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await get_ticket_by_user_id(db, user_id)


@router.post("", response_model=TicketResponse, status_code=status.HTTP_201_CREATED)
async def reserve_ticket(
    ticket_data: TicketCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Reserve a ticket; it stays RESERVED until its payment is processed."""
    return await create_ticket(db, user_id, ticket_data.ticket_type_id)
