"""
Pytest fixtures for a throwaway database, sessions and the HTTP client.

Each test gets a fresh SQLite file (via aiosqlite) with the schema created
from the ORM metadata, so no database server is needed.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from devevent.main import app
from devevent.db.base import Base
from devevent.db.session import get_db
from devevent.models.event import Event
from devevent.schemas.event import EventCreate
from devevent.services.event_service import create_event


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'devevent_test.db'}"


@pytest_asyncio.fixture
async def engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """Create tables, yield the engine, then dispose of it."""
    engine = create_async_engine(database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the DB dependency with the test session."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def event_payload() -> dict:
    """A complete, valid event submission with un-normalized date and time."""
    return {
        "title": "Next.js Conf 2026!!",
        "description": "Annual Next.js conference with core team talks.",
        "overview": "Two days of talks, workshops and networking.",
        "image": "/images/event1.png",
        "venue": "Moscone Center",
        "location": "San Francisco, CA, USA",
        "date": "March 10, 2026",
        "time": "2:30 PM",
        "mode": "hybrid",
        "audience": "Frontend developers",
        "agenda": ["Keynote", "Workshops", "Closing panel"],
        "organizer": "Vercel",
        "tags": ["nextjs", "react", "web"],
    }


@pytest_asyncio.fixture
async def test_event(db_session: AsyncSession, event_payload: dict) -> Event:
    """Create an event through the event pipeline."""
    event = await create_event(db_session, EventCreate(**event_payload))
    await db_session.commit()
    return event
