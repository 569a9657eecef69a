"""
Event endpoints. Raw input is handed to the event service unvalidated;
domain failures are rendered by the handlers in app.api.errors.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.schemas.event import EventCreate, EventUpdate, EventResponse, EventListResponse
from app.schemas.booking import BookingResponse
from app.services.event_service import (
    create_event,
    update_event,
    get_event,
    get_event_by_slug,
    list_events,
)
from app.services.booking_service import get_event_bookings

router = APIRouter(prefix="/events", tags=["Events"])


@router.post("/", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event_endpoint(
    event_data: EventCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create an event. The slug is derived from the title."""
    return await create_event(db, event_data.model_dump())


@router.get("/", response_model=EventListResponse)
async def list_events_endpoint(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    """List events with pagination, newest first."""
    events, total = await list_events(db, page, page_size)
    return EventListResponse(
        events=[EventResponse.model_validate(e) for e in events],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/slug/{slug}", response_model=EventResponse)
async def get_event_by_slug_endpoint(
    slug: str,
    db: AsyncSession = Depends(get_db),
):
    return await get_event_by_slug(db, slug)


@router.get("/{event_id}", response_model=EventResponse)
async def get_event_endpoint(
    event_id: int,
    db: AsyncSession = Depends(get_db),
):
    return await get_event(db, event_id)


@router.patch("/{event_id}", response_model=EventResponse)
async def update_event_endpoint(
    event_id: int,
    changes: EventUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Partially update an event.
    The slug is re-derived only when the title changes.
    """
    return await update_event(db, event_id, changes.model_dump(exclude_unset=True))


@router.get("/{event_id}/bookings", response_model=list[BookingResponse])
async def list_event_bookings_endpoint(
    event_id: int,
    db: AsyncSession = Depends(get_db),
):
    await get_event(db, event_id)
    return await get_event_bookings(db, event_id)
