"""
NoteDesk Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock AsyncSession for service unit tests
    ├── db_engine: Throwaway SQLite database (aiosqlite) with all tables
    ├── session_factory: async_sessionmaker bound to db_engine
    ├── seed_user / seed_note: Insert rows directly, bypassing the API
    └── test_client: HTTPX AsyncClient with the DB dependencies overridden
"""

import os
import tempfile
import uuid
from unittest.mock import AsyncMock, MagicMock

# Settings are read at import time; point them at SQLite before notedesk loads
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="notedesk_test_"), "bootstrap.db"
)
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from notedesk.database import Base, get_db_session, get_session_factory
from notedesk.models import Note, User


@pytest.fixture
def mock_db_session():
    """
    A mock AsyncSession (no real DB needed).

    Usage:
        async def test_x(mock_db_session):
            with patch("notedesk.services.note_service.note_repo") as repo:
                repo.find_all = AsyncMock(return_value=[])
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """
    A file-backed SQLite database with every table created.

    File-backed (not :memory:) so the concurrent username lookups in
    GET /notes can each open their own connection.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'notedesk.db'}",
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def seed_user(session_factory):
    """Factory fixture: `await seed_user("alice")` → the new user's id."""

    async def _seed(username: str) -> uuid.UUID:
        async with session_factory() as session:
            user = User(username=username)
            session.add(user)
            await session.commit()
            return user.id

    return _seed


@pytest.fixture
def seed_note(session_factory):
    """Factory fixture: `await seed_note(user_id, "Title", "text")` → the Note."""

    async def _seed(user_id: uuid.UUID, title: str, text: str = "body", completed: bool = False) -> Note:
        async with session_factory() as session:
            note = Note(user=user_id, title=title, text=text, completed=completed)
            session.add(note)
            await session.commit()
            return note

    return _seed


@pytest.fixture
def fetch_notes(session_factory):
    """Factory fixture: `await fetch_notes()` → every Note row in the store."""
    from sqlalchemy import select

    async def _fetch():
        async with session_factory() as session:
            result = await session.execute(select(Note))
            return list(result.scalars().all())

    return _fetch


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient talking to the app through ASGITransport.

    get_db_session and get_session_factory are overridden so requests hit
    the per-test SQLite database.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
    """
    from notedesk.main import app

    async def override_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_session_factory] = lambda: session_factory

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
