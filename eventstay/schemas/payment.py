"""
Pydantic schemas for payment processing.
"""

from datetime import date
from pydantic import BaseModel, Field


class CardData(BaseModel):
    issuer: str = Field(..., min_length=1, max_length=100)
    number: str = Field(..., pattern=r"^\d{13,19}$")
    name: str = Field(..., min_length=1, max_length=255)
    expiration_date: date
    cvv: str = Field(..., pattern=r"^\d{3,4}$")


class PaymentProcess(BaseModel):
    ticket_id: int = Field(..., gt=0)
    card_data: CardData


class PaymentResponse(BaseModel):
    id: int
    ticket_id: int
    value: int
    card_issuer: str
    card_last_digits: str

    model_config = {"from_attributes": True}
