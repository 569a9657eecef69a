"""
Event service: validated create/update and read operations.

Every write goes through SQLAlchemyGateway.precommit with validate_event, so
no Event reaches the database unnormalized. Updates are validated as a full
record (stored values merged with the changes) against the stored record, so
the slug is only re-derived when the title actually changes.
"""

from typing import Any, Mapping

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import RecordNotFoundError
from app.core.logging import get_logger
from app.infrastructure.storage_gateway import SQLAlchemyGateway, parse_record_id
from app.models.event import Event
from app.validation import EventRecord, validate_event

logger = get_logger(__name__)


def to_record(event: Event) -> EventRecord:
    """Snapshot of a stored Event as a candidate record."""
    return EventRecord.from_mapping(
        {column.name: getattr(event, column.name) for column in Event.__table__.columns}
    )


async def create_event(db: AsyncSession, data: Mapping[str, Any]) -> Event:
    """Validate raw input and insert a new Event."""
    gateway = SQLAlchemyGateway(db)
    event = await gateway.precommit(Event(), EventRecord.from_mapping(data), validate_event)

    logger.info("event_saved", event_id=event.id, slug=event.slug, created=True)
    return event


async def update_event(db: AsyncSession, event_id: Any, changes: Mapping[str, Any]) -> Event:
    """
    Apply a partial update to an Event.
    The stored row is left unchanged if validation fails.
    """
    event = await get_event(db, event_id)
    previous = to_record(event)
    candidate = previous.merged(changes)

    gateway = SQLAlchemyGateway(db)
    await gateway.precommit(event, candidate, lambda record: validate_event(record, previous))

    logger.info(
        "event_saved",
        event_id=event.id,
        slug=event.slug,
        created=False,
        slug_changed=event.slug != previous.slug,
    )
    return event


async def get_event(db: AsyncSession, event_id: Any) -> Event:
    """Get a single event by ID."""
    key = parse_record_id(event_id)
    event = None
    if key is not None:
        result = await db.execute(select(Event).where(Event.id == key))
        event = result.scalar_one_or_none()

    if not event:
        raise RecordNotFoundError("Event", event_id)
    return event


async def get_event_by_slug(db: AsyncSession, slug: str) -> Event:
    """Get a single event by its slug (uses ix_events_slug)."""
    result = await db.execute(select(Event).where(Event.slug == slug))
    event = result.scalar_one_or_none()

    if not event:
        raise RecordNotFoundError("Event", slug)
    return event


async def list_events(
    db: AsyncSession,
    page: int = 1,
    page_size: int = 20,
) -> tuple[list[Event], int]:
    """List events with pagination, newest first."""
    total = (await db.execute(select(func.count()).select_from(Event))).scalar()

    result = await db.execute(
        select(Event)
        .order_by(Event.created_at.desc(), Event.id.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
    )
    return list(result.scalars().all()), total
