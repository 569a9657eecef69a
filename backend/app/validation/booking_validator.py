"""
Booking validation and referential integrity.

Format checks (event_id, email) run before the existence check so a
malformed request never costs a storage round trip. The existence check is
the only await in the pipeline; it is not retried.

Known gap: an Event deleted between the check and the commit leaves a
dangling booking. This is accepted, not locked against.
"""

import re
from dataclasses import replace

from app.core.errors import (
    DanglingReferenceError,
    InvalidEmailError,
    MissingFieldError,
)
from app.services.interfaces.storage import StorageGateway
from app.validation.records import BookingRecord

# Pragmatic local@domain.tld, no embedded whitespace
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(value: str) -> bool:
    return EMAIL_RE.match(value) is not None


async def validate_booking(candidate: BookingRecord, gateway: StorageGateway) -> BookingRecord:
    """
    Validate a candidate Booking and return its normalized copy.

    Raises:
        MissingFieldError: event_id or email absent
        InvalidEmailError: email does not look like local@domain.tld
        DanglingReferenceError: event_id does not resolve to a stored Event
        DependencyUnavailableError: the existence check could not complete
    """
    event_id = candidate.event_id
    if event_id is None or (isinstance(event_id, str) and not event_id.strip()):
        raise MissingFieldError("eventId", event_id, requirement="is required")

    email = candidate.email
    if not isinstance(email, str) or not email.strip():
        raise MissingFieldError("email", email)

    email = email.strip()
    if not is_valid_email(email):
        raise InvalidEmailError(email)

    # The gateway translates its own transport failures into
    # DependencyUnavailableError; anything else is a bug and propagates
    if not await gateway.exists(event_id):
        raise DanglingReferenceError("eventId", event_id)

    return replace(candidate, email=email.lower())
