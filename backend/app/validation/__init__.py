"""
Write-time validation: pure normalizers plus the booking existence check.
"""

from app.validation.booking_validator import validate_booking
from app.validation.event_validator import validate_event
from app.validation.records import BookingRecord, EventRecord
from app.validation.slug import slugify

__all__ = [
    "validate_event",
    "validate_booking",
    "EventRecord",
    "BookingRecord",
    "slugify",
]
