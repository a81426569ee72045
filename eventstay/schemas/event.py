"""
Pydantic schemas for event responses.
"""

from datetime import datetime
from pydantic import BaseModel


class EventResponse(BaseModel):
    id: int
    title: str
    background_image_url: str
    logo_image_url: str
    starts_at: datetime
    ends_at: datetime

    model_config = {"from_attributes": True}
