"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency; the UNIQUE constraint on
      profiles.principal_id behaves the same as on PostgreSQL
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

import notekeeper.infrastructure.database as db_module
import notekeeper.models  # noqa: F401
from notekeeper.db.base import Base
from notekeeper.infrastructure.database import get_db, DatabaseSessionManager
from notekeeper.main import app
from notekeeper.models.profile import Profile
from notekeeper.services.note_manager import NoteManager
from notekeeper.services.profile_manager import ProfileManager

from tests.services.principals import ALICE, BOB


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def profiles(test_db) -> ProfileManager:
    return ProfileManager(test_db)


@pytest.fixture
def notes(test_db) -> NoteManager:
    return NoteManager(test_db)


@pytest.fixture
async def alice(test_db) -> Profile:
    """Principal 1 with a profile."""
    profile = Profile(principal_id=ALICE, nickname="alice")
    test_db.add(profile)
    await test_db.commit()
    await test_db.refresh(profile)
    return profile


@pytest.fixture
async def bob(test_db) -> Profile:
    """Principal 2 with a profile."""
    profile = Profile(principal_id=BOB, nickname="bob")
    test_db.add(profile)
    await test_db.commit()
    await test_db.refresh(profile)
    return profile


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
