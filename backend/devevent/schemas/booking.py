"""
Pydantic schemas for booking-related request/response validation.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class BookingCreate(BaseModel):
    event_id: int
    email: str


class BookingUpdate(BaseModel):
    event_id: Optional[int] = None
    email: Optional[str] = None


class BookingResponse(BaseModel):
    id: int
    event_id: int
    email: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
