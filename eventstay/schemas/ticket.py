"""
Pydantic schemas for ticket types and tickets.
"""

from pydantic import BaseModel, Field


class TicketTypeResponse(BaseModel):
    id: int
    name: str
    price: int
    is_remote: bool
    includes_hotel: bool

    model_config = {"from_attributes": True}


class TicketCreate(BaseModel):
    ticket_type_id: int = Field(..., gt=0)


class TicketResponse(BaseModel):
    id: int
    status: str
    ticket_type_id: int
    enrollment_id: int
    ticket_type: TicketTypeResponse

    model_config = {"from_attributes": True}
