"""
Pydantic schemas for booking-related request/response shapes.
"""

from datetime import datetime
from typing import Any
from pydantic import AliasChoices, BaseModel, Field


class BookingCreate(BaseModel):
    event_id: Any = Field(None, validation_alias=AliasChoices("event_id", "eventId"))
    email: Any = None

    model_config = {"extra": "ignore"}


class BookingUpdate(BookingCreate):
    """Partial update: only the keys present in the request are applied."""


class BookingResponse(BaseModel):
    id: int
    event_id: int
    email: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
