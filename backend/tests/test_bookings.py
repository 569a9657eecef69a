"""
Tests for booking endpoints and the event existence check.
"""

import pytest
from httpx import AsyncClient

from app.core.errors import DependencyUnavailableError
from app.infrastructure.storage_gateway import SQLAlchemyGateway


@pytest.mark.asyncio
async def test_create_booking(client: AsyncClient, test_event):
    """Email is stored trimmed and lowercased."""
    response = await client.post(
        "/api/v1/bookings/",
        json={"event_id": test_event.id, "email": "  FOO@BAR.com "},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["event_id"] == test_event.id
    assert data["email"] == "foo@bar.com"


@pytest.mark.asyncio
async def test_create_booking_camel_case_event_id(client: AsyncClient, test_event):
    response = await client.post(
        "/api/v1/bookings/",
        json={"eventId": test_event.id, "email": "a@b.co"},
    )
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_create_booking_invalid_email(client: AsyncClient, test_event):
    response = await client.post(
        "/api/v1/bookings/",
        json={"event_id": test_event.id, "email": "not-an-email"},
    )
    assert response.status_code == 422
    assert response.json()["code"] == "INVALID_EMAIL"


@pytest.mark.asyncio
async def test_create_booking_missing_event_id(client: AsyncClient):
    response = await client.post("/api/v1/bookings/", json={"email": "a@b.co"})
    assert response.status_code == 422
    assert response.json()["code"] == "MISSING_FIELD"
    assert response.json()["field"] == "eventId"


@pytest.mark.asyncio
async def test_book_nonexistent_event(client: AsyncClient, test_event):
    """A dangling reference is rejected and nothing is stored."""
    response = await client.post(
        "/api/v1/bookings/",
        json={"event_id": 99999, "email": "a@b.co"},
    )
    assert response.status_code == 422
    assert response.json()["code"] == "DANGLING_REFERENCE"
    assert response.json()["field"] == "eventId"

    bookings = await client.get(f"/api/v1/events/{test_event.id}/bookings")
    assert bookings.json() == []


@pytest.mark.asyncio
async def test_book_when_storage_unavailable(client: AsyncClient, test_event, monkeypatch):
    async def unavailable(self, event_id):
        raise DependencyUnavailableError("exists")

    monkeypatch.setattr(SQLAlchemyGateway, "exists", unavailable)

    response = await client.post(
        "/api/v1/bookings/",
        json={"event_id": test_event.id, "email": "a@b.co"},
    )
    assert response.status_code == 503
    assert response.json()["code"] == "DEPENDENCY_UNAVAILABLE"


@pytest.mark.asyncio
async def test_update_booking_rechecks_event(client: AsyncClient, test_event):
    created = (await client.post(
        "/api/v1/bookings/",
        json={"event_id": test_event.id, "email": "a@b.co"},
    )).json()

    moved = await client.patch(f"/api/v1/bookings/{created['id']}", json={"event_id": 424242})
    assert moved.status_code == 422
    assert moved.json()["code"] == "DANGLING_REFERENCE"

    renamed = await client.patch(f"/api/v1/bookings/{created['id']}", json={"email": " New@Mail.io"})
    assert renamed.status_code == 200
    assert renamed.json()["email"] == "new@mail.io"
    assert renamed.json()["event_id"] == test_event.id


@pytest.mark.asyncio
async def test_list_event_bookings(client: AsyncClient, test_event):
    for email in ("one@example.com", "two@example.com"):
        await client.post("/api/v1/bookings/", json={"event_id": test_event.id, "email": email})

    response = await client.get(f"/api/v1/events/{test_event.id}/bookings")
    assert response.status_code == 200
    assert [b["email"] for b in response.json()] == ["one@example.com", "two@example.com"]


@pytest.mark.asyncio
async def test_list_bookings_unknown_event(client: AsyncClient):
    response = await client.get("/api/v1/events/99999/bookings")
    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("event_id", [2**63, "9223372036854775808", 2**31])
async def test_book_out_of_range_event_id(client: AsyncClient, test_event, event_id):
    """An id no event can have is a dangling reference, not a storage failure."""
    response = await client.post(
        "/api/v1/bookings/",
        json={"event_id": event_id, "email": "a@b.co"},
    )
    assert response.status_code == 422
    assert response.json()["code"] == "DANGLING_REFERENCE"
    assert response.json()["message"] == "Booking references an event that does not exist."


@pytest.mark.asyncio
async def test_get_booking_out_of_range_id(client: AsyncClient):
    response = await client.get("/api/v1/bookings/9223372036854775808")
    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_list_bookings_out_of_range_event_id(client: AsyncClient):
    response = await client.get("/api/v1/events/9223372036854775808/bookings")
    assert response.status_code == 404
