"""
Tests for event endpoints and the event service.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy import select, func

from devevent.core.errors import DuplicateSlugError
from devevent.models.event import Event
from devevent.schemas.event import EventCreate
from devevent.services import event_service


@pytest.mark.asyncio
async def test_create_event(client: AsyncClient, event_payload):
    """Slug, date and time are normalized on create."""
    response = await client.post("/api/v1/events/", json=event_payload)
    assert response.status_code == 201
    data = response.json()
    assert data["slug"] == "nextjs-conf-2026"
    assert data["date"] == "2026-03-10"
    assert data["time"] == "14:30"
    assert data["title"] == "Next.js Conf 2026!!"
    assert data["created_at"]
    assert data["updated_at"]


@pytest.mark.asyncio
async def test_create_event_blank_venue(client: AsyncClient, db_session, event_payload):
    """A venue of only spaces is rejected and nothing is stored."""
    event_payload["venue"] = "   "
    response = await client.post("/api/v1/events/", json=event_payload)
    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "validation_error"
    assert body["field"] == "venue"

    count = (await db_session.execute(select(func.count()).select_from(Event))).scalar()
    assert count == 0


@pytest.mark.asyncio
async def test_create_event_missing_field(client: AsyncClient, event_payload):
    """Shape errors are caught by the request schema."""
    del event_payload["agenda"]
    response = await client.post("/api/v1/events/", json=event_payload)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_event_duplicate_slug(client: AsyncClient, test_event, event_payload):
    """A title that yields an existing slug returns 409."""
    event_payload["title"] = "next.js conf 2026"
    response = await client.post("/api/v1/events/", json=event_payload)
    assert response.status_code == 409
    assert response.json()["error"] == "duplicate_slug"


@pytest.mark.asyncio
async def test_get_event_by_slug(client: AsyncClient, test_event):
    response = await client.get("/api/v1/events/nextjs-conf-2026")
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == test_event.id
    assert data["tags"] == ["nextjs", "react", "web"]


@pytest.mark.asyncio
async def test_get_event_not_found(client: AsyncClient):
    response = await client.get("/api/v1/events/no-such-event")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_events(client: AsyncClient, test_event):
    response = await client.get("/api/v1/events/?page=1&page_size=5")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 1
    assert data["page_size"] == 5
    assert data["events"][0]["slug"] == "nextjs-conf-2026"


@pytest.mark.asyncio
async def test_update_keeps_slug_when_title_unchanged(client: AsyncClient, db_session, event_payload):
    """A stored slug survives edits that do not touch the title."""
    legacy = Event(**dict(event_payload, slug="legacy-next-conf", date="2026-03-10", time="14:30"))
    db_session.add(legacy)
    await db_session.commit()

    response = await client.patch(
        f"/api/v1/events/{legacy.id}",
        json={"description": "Updated description", "title": event_payload["title"]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["slug"] == "legacy-next-conf"
    assert data["description"] == "Updated description"


@pytest.mark.asyncio
async def test_update_title_regenerates_slug(client: AsyncClient, test_event):
    response = await client.patch(
        f"/api/v1/events/{test_event.id}",
        json={"title": "React Summit 2026", "time": "9:30 am"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["slug"] == "react-summit-2026"
    assert data["time"] == "09:30"

    old = await client.get("/api/v1/events/nextjs-conf-2026")
    assert old.status_code == 404


@pytest.mark.asyncio
async def test_update_rejects_blank_field(client: AsyncClient, test_event):
    response = await client.patch(f"/api/v1/events/{test_event.id}", json={"organizer": " "})
    assert response.status_code == 422
    assert response.json()["field"] == "organizer"


@pytest.mark.asyncio
async def test_update_event_not_found(client: AsyncClient):
    response = await client.patch("/api/v1/events/99999", json={"description": "x"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_title_onto_existing_slug(client: AsyncClient, test_event, event_payload):
    """Renaming an event to another event's title returns 409 and keeps both slugs."""
    other = await client.post("/api/v1/events/", json={**event_payload, "title": "React Summit 2026"})
    assert other.status_code == 201

    response = await client.patch(
        f"/api/v1/events/{other.json()['id']}", json={"title": "Next.js Conf 2026!!"}
    )
    assert response.status_code == 409
    assert response.json()["error"] == "duplicate_slug"

    kept = await client.get("/api/v1/events/react-summit-2026")
    assert kept.status_code == 200


@pytest.mark.asyncio
async def test_unique_index_reports_duplicate_slug(db_session, test_event, event_payload, monkeypatch):
    """A writer that slipped past the pre-check still gets DuplicateSlugError."""

    async def skip_check(db, slug, exclude_id=None):
        return None

    monkeypatch.setattr(event_service, "_ensure_slug_available", skip_check)

    with pytest.raises(DuplicateSlugError) as exc_info:
        await event_service.create_event(db_session, EventCreate(**event_payload))
    assert exc_info.value.slug == "nextjs-conf-2026"

    await db_session.rollback()
    count = await db_session.scalar(select(func.count()).select_from(Event))
    assert count == 1
