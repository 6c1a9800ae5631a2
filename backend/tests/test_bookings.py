"""
Tests for booking endpoints and the booking service.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy import select, func

from devevent.core.errors import EventReferenceError
from devevent.models.booking import Booking
from devevent.schemas.booking import BookingCreate
from devevent.services.booking_service import create_booking


async def _booking_count(db_session) -> int:
    return (await db_session.execute(select(func.count()).select_from(Booking))).scalar()


@pytest.mark.asyncio
async def test_create_booking(client: AsyncClient, test_event):
    response = await client.post(
        "/api/v1/bookings/",
        json={"event_id": test_event.id, "email": "  Grace.Hopper@Example.com "},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["event_id"] == test_event.id
    assert data["email"] == "grace.hopper@example.com"


@pytest.mark.asyncio
async def test_booking_unknown_event(client: AsyncClient, db_session):
    """A booking for a missing event is rejected and not stored."""
    response = await client.post(
        "/api/v1/bookings/",
        json={"event_id": 99999, "email": "ada@example.com"},
    )
    assert response.status_code == 422
    body = response.json()
    assert body["field"] == "event_id"
    assert "99999" in body["detail"]
    assert await _booking_count(db_session) == 0


@pytest.mark.asyncio
async def test_booking_service_unknown_event(db_session):
    with pytest.raises(EventReferenceError):
        await create_booking(db_session, BookingCreate(event_id=12345, email="ada@example.com"))
    assert await _booking_count(db_session) == 0


@pytest.mark.asyncio
async def test_booking_invalid_email(client: AsyncClient, db_session, test_event):
    response = await client.post(
        "/api/v1/bookings/",
        json={"event_id": test_event.id, "email": "not an email"},
    )
    assert response.status_code == 422
    assert response.json()["field"] == "email"
    assert await _booking_count(db_session) == 0


@pytest.mark.asyncio
async def test_list_event_bookings(client: AsyncClient, test_event):
    for email in ("a@example.com", "b@example.com"):
        await client.post("/api/v1/bookings/", json={"event_id": test_event.id, "email": email})

    response = await client.get(f"/api/v1/events/{test_event.id}/bookings")
    assert response.status_code == 200
    assert [b["email"] for b in response.json()] == ["a@example.com", "b@example.com"]


@pytest.mark.asyncio
async def test_list_bookings_for_missing_event(client: AsyncClient):
    response = await client.get("/api/v1/events/99999/bookings")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_booking_email(client: AsyncClient, test_event):
    created = await client.post(
        "/api/v1/bookings/", json={"event_id": test_event.id, "email": "old@example.com"}
    )
    booking_id = created.json()["id"]

    response = await client.patch(f"/api/v1/bookings/{booking_id}", json={"email": "NEW@example.com"})
    assert response.status_code == 200
    assert response.json()["email"] == "new@example.com"
    assert response.json()["event_id"] == test_event.id


@pytest.mark.asyncio
async def test_update_booking_to_missing_event(client: AsyncClient, test_event):
    """Moving a booking to an unknown event is rejected and leaves it unchanged."""
    created = await client.post(
        "/api/v1/bookings/", json={"event_id": test_event.id, "email": "ada@example.com"}
    )
    booking_id = created.json()["id"]

    response = await client.patch(f"/api/v1/bookings/{booking_id}", json={"event_id": 424242})
    assert response.status_code == 422
    assert response.json()["field"] == "event_id"

    bookings = await client.get(f"/api/v1/events/{test_event.id}/bookings")
    assert [b["id"] for b in bookings.json()] == [booking_id]


@pytest.mark.asyncio
async def test_update_booking_not_found(client: AsyncClient):
    response = await client.patch("/api/v1/bookings/99999", json={"email": "ada@example.com"})
    assert response.status_code == 404
