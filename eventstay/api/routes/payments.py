"""
Payment lookup and processing for the user's own tickets.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from eventstay.db.session import get_db
from eventstay.core.security import get_current_user_id
from eventstay.schemas.payment import PaymentProcess, PaymentResponse
from eventstay.services.payment_service import get_payment_by_ticket_id, process_payment

router = APIRouter(prefix="/payments", tags=["Payments"])


@router.get("", response_model=PaymentResponse)
async def get_payment(
    ticket_id: int = Query(..., gt=0),
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await get_payment_by_ticket_id(db, user_id, ticket_id)


@router.post("/process", response_model=PaymentResponse)
async def process_payment_endpoint(
    payment_data: PaymentProcess,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Pay for a ticket. The ticket moves to PAID in the same transaction."""
    return await process_payment(db, payment_data.ticket_id, user_id, payment_data.card_data)
