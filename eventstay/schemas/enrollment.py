"""
Pydantic schemas for enrollment request/response validation.
"""

from datetime import date
from pydantic import BaseModel, Field


class EnrollmentUpsert(BaseModel):
    name: str = Field(..., min_length=3, max_length=255)
    cpf: str = Field(..., pattern=r"^\d{11}$")
    birthday: date
    phone: str = Field(..., pattern=r"^\+?\d{10,14}$")


class EnrollmentResponse(BaseModel):
    id: int
    user_id: int
    name: str
    cpf: str
    birthday: date
    phone: str

    model_config = {"from_attributes": True}
