"""
Pytest fixtures for test database, client, and sample payloads.

Each test gets a fresh SQLite file initialised through the same
init_db()/close_db() contract the application lifespan uses.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from app.main import app
from app.db.session import init_db, close_db, get_session_factory
from app.models.event import Event
from app.services.event_service import create_event


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Create tables in a throwaway database, dispose afterwards."""
    engine = await init_db(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", create_tables=True)
    yield engine
    await close_db()


@pytest_asyncio.fixture(scope="function")
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    async with get_session_factory()() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client; requests use the app's own get_db against the test engine."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def event_payload() -> dict:
    """Raw event input, deliberately un-normalized."""
    return {
        "title": "  Annual Tech Summit 2025!  ",
        "description": "Two days of talks and workshops.",
        "overview": " The yearly gathering for builders. ",
        "image": "/images/summit.png",
        "venue": "Moscone Center",
        "location": "San Francisco, CA",
        "date": "2025-1-5",
        "time": "9:5",
        "mode": "hybrid",
        "audience": "Developers",
        "agenda": ["Keynote", "Workshops", "Closing panel"],
        "organizer": "Tech Org",
        "tags": ["tech", "summit"],
    }


@pytest_asyncio.fixture
async def test_event(db_session: AsyncSession, event_payload: dict) -> Event:
    """A committed event with slug annual-tech-summit-2025."""
    event = await create_event(db_session, event_payload)
    await db_session.commit()
    return event
