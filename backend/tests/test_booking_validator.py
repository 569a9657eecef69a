"""
Unit tests for booking validation with an in-memory storage gateway.
"""

import pytest

from app.core.errors import (
    DanglingReferenceError,
    DependencyUnavailableError,
    InvalidEmailError,
    MissingFieldError,
)
from app.services.interfaces.storage import StorageGateway
from app.validation import BookingRecord, validate_booking


class FakeGateway(StorageGateway):
    def __init__(self, event_ids=(), error: Exception | None = None):
        self.event_ids = set(event_ids)
        self.error = error
        self.calls = []

    async def exists(self, event_id) -> bool:
        self.calls.append(event_id)
        if self.error:
            raise self.error
        return event_id in self.event_ids


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway(event_ids={1})


@pytest.mark.asyncio
async def test_email_is_trimmed_and_lowercased(gateway):
    booking = await validate_booking(BookingRecord(event_id=1, email="  FOO@BAR.com "), gateway)
    assert booking.email == "foo@bar.com"
    assert booking.event_id == 1
    assert gateway.calls == [1]


@pytest.mark.asyncio
@pytest.mark.parametrize("email", ["not-an-email", "foo@bar", "foo bar@baz.com", "@baz.com", "a@@b.com"])
async def test_invalid_email_skips_existence_check(gateway, email):
    with pytest.raises(InvalidEmailError):
        await validate_booking(BookingRecord(event_id=1, email=email), gateway)
    assert gateway.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("event_id", [None, "", "   "])
async def test_missing_event_id(gateway, event_id):
    with pytest.raises(MissingFieldError) as exc_info:
        await validate_booking(BookingRecord(event_id=event_id, email="a@b.co"), gateway)
    assert exc_info.value.field == "eventId"
    assert gateway.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("email", [None, "", "   ", 12])
async def test_missing_email(gateway, email):
    with pytest.raises(MissingFieldError) as exc_info:
        await validate_booking(BookingRecord(event_id=1, email=email), gateway)
    assert exc_info.value.field == "email"


@pytest.mark.asyncio
async def test_event_id_is_checked_before_email(gateway):
    with pytest.raises(MissingFieldError) as exc_info:
        await validate_booking(BookingRecord(event_id=None, email="bad"), gateway)
    assert exc_info.value.field == "eventId"


@pytest.mark.asyncio
async def test_unknown_event_is_dangling_reference(gateway):
    with pytest.raises(DanglingReferenceError) as exc_info:
        await validate_booking(BookingRecord(event_id=999, email="a@b.co"), gateway)
    assert exc_info.value.field == "eventId"
    assert gateway.calls == [999]


@pytest.mark.asyncio
async def test_gateway_programming_error_propagates():
    # Only the gateway decides what counts as an unavailable dependency
    gateway = FakeGateway(error=RuntimeError("bug in gateway"))

    with pytest.raises(RuntimeError, match="bug in gateway"):
        await validate_booking(BookingRecord(event_id=1, email="a@b.co"), gateway)


@pytest.mark.asyncio
async def test_gateway_dependency_error_passes_through():
    original = DependencyUnavailableError("exists")
    gateway = FakeGateway(error=original)

    with pytest.raises(DependencyUnavailableError) as exc_info:
        await validate_booking(BookingRecord(event_id=1, email="a@b.co"), gateway)
    assert exc_info.value is original
