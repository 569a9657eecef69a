"""
Booking service: validated create/update and lookups.

REFERENTIAL INTEGRITY
=====================

A booking references its event by id only (no foreign key, no cascade).
validate_booking asks the gateway whether the event exists before the row is
flushed, so no booking is committed against a missing event.

Known gap (time-of-check/time-of-use):
  An event deleted after the existence check but before the commit leaves a
  booking pointing at nothing. Event deletion is not part of this service,
  and closing the gap would need the check and the insert in one storage
  transaction with a lock on the event row. Not done here.
"""

from dataclasses import replace
from typing import Any, Mapping

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import RecordNotFoundError
from app.core.logging import get_logger
from app.infrastructure.storage_gateway import SQLAlchemyGateway, parse_record_id
from app.models.booking import Booking
from app.validation import BookingRecord, validate_booking

logger = get_logger(__name__)


def to_record(booking: Booking) -> BookingRecord:
    return BookingRecord(event_id=booking.event_id, email=booking.email)


def _validator(gateway: SQLAlchemyGateway):
    async def validate(candidate: BookingRecord) -> BookingRecord:
        normalized = await validate_booking(candidate, gateway)
        # exists() accepted it, so it coerces to the integer key
        return replace(normalized, event_id=parse_record_id(normalized.event_id))

    return validate


async def create_booking(db: AsyncSession, data: Mapping[str, Any]) -> Booking:
    """Validate raw input, check the event exists, insert the booking."""
    gateway = SQLAlchemyGateway(db)
    booking = await gateway.precommit(Booking(), BookingRecord.from_mapping(data), _validator(gateway))

    logger.info("booking_saved", booking_id=booking.id, event_id=booking.event_id, created=True)
    return booking


async def update_booking(db: AsyncSession, booking_id: int, changes: Mapping[str, Any]) -> Booking:
    """Apply a partial update; the existence check runs again on every write."""
    booking = await get_booking(db, booking_id)
    candidate = to_record(booking).merged(changes)

    gateway = SQLAlchemyGateway(db)
    await gateway.precommit(booking, candidate, _validator(gateway))

    logger.info("booking_saved", booking_id=booking.id, event_id=booking.event_id, created=False)
    return booking


async def get_booking(db: AsyncSession, booking_id: Any) -> Booking:
    key = parse_record_id(booking_id)
    booking = None
    if key is not None:
        result = await db.execute(select(Booking).where(Booking.id == key))
        booking = result.scalar_one_or_none()

    if not booking:
        raise RecordNotFoundError("Booking", booking_id)
    return booking


async def get_event_bookings(db: AsyncSession, event_id: Any) -> list[Booking]:
    """Get all bookings referencing an event (uses ix_bookings_event_id)."""
    event_id = parse_record_id(event_id)
    if event_id is None:
        return []
    result = await db.execute(
        select(Booking)
        .where(Booking.event_id == event_id)
        .order_by(Booking.created_at.asc(), Booking.id.asc())
    )
    return list(result.scalars().all())
