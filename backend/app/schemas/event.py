"""
Pydantic schemas for event-related request/response shapes.

Request fields are deliberately loose (Any): the HTTP layer only collects
raw input, and every invariant is enforced by app.validation so failures
come back with the domain error codes instead of schema errors.
"""

from datetime import datetime
from typing import Any
from pydantic import BaseModel, Field


class EventCreate(BaseModel):
    title: Any = None
    description: Any = None
    overview: Any = None
    image: Any = None
    venue: Any = None
    location: Any = None
    date: Any = Field(None, description="Any parsable date, stored as YYYY-MM-DD")
    time: Any = Field(None, description="H:MM or HH:MM (24h), stored as HH:MM")
    mode: Any = None
    audience: Any = None
    agenda: Any = None
    organizer: Any = None
    tags: Any = None

    # Unknown keys are dropped
    model_config = {"extra": "ignore"}


class EventUpdate(EventCreate):
    """Partial update: only the keys present in the request are applied."""


class EventResponse(BaseModel):
    id: int
    title: str
    slug: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: str
    audience: str
    agenda: list[str]
    organizer: str
    tags: list[str]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class EventListResponse(BaseModel):
    events: list[EventResponse]
    total: int
    page: int
    page_size: int
