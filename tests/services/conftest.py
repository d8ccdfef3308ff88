"""Service test fixtures — async DB, fixed clock, seed helpers and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db and get_clock dependencies overridden for route tests
    - db_manager patched so the readiness probe sees the test engine
    - "Today" is fixed at 2024-06-15 for every age computation

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for service and route tests
      (PostgreSQL-specific features not exercised here)
    - Seeded rows go through their own session; routes open a fresh session per request
"""

from datetime import date, datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from dating_api.api.dependencies import get_clock
from dating_api.core.age import shift_years
from dating_api.core.clock import FixedClock
from dating_api.db.base import Base
from dating_api.infrastructure.database import get_db, DatabaseSessionManager
from dating_api.models.like import Like
from dating_api.models.message import Message
from dating_api.models.user import User
import dating_api.infrastructure.database as db_module
from dating_api.main import app

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)
TODAY = NOW.date()


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
def clock():
    return FixedClock(NOW)


@pytest.fixture
async def client(test_engine, test_session_factory, clock):
    """FastAPI test client with DB and clock dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock

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


def birth_date_for_age(age: int, today: date = TODAY) -> date:
    """Birth date that makes the user exactly `age` today."""
    return shift_years(today, -age)


@pytest.fixture
def make_user(test_db):
    """Insert a user and return it.

    Ages are relative to TODAY; created/last_active default to NOW minus
    `minutes_ago` so tests can control ordering.
    """
    async def _make(
        username: str,
        gender: str = "female",
        age: int = 25,
        minutes_ago: int = 0,
        created_days_ago: int = 30,
    ) -> User:
        user = User(
            username=username,
            known_as=username.title(),
            gender=gender,
            date_of_birth=birth_date_for_age(age),
            city="Lisbon",
            country="Portugal",
            created=NOW - timedelta(days=created_days_ago),
            last_active=NOW - timedelta(minutes=minutes_ago),
        )
        test_db.add(user)
        await test_db.commit()
        return user
    return _make


@pytest.fixture
def make_like(test_db):
    async def _make(liker: User, likee: User) -> Like:
        like = Like(liker_id=liker.id, likee_id=likee.id)
        test_db.add(like)
        await test_db.commit()
        return like
    return _make


@pytest.fixture
def make_message(test_db):
    async def _make(
        sender: User, recipient: User, content: str = "hi",
        minutes_ago: int = 0, **state,
    ) -> Message:
        message = Message(
            sender_id=sender.id,
            recipient_id=recipient.id,
            content=content,
            sent_at=NOW - timedelta(minutes=minutes_ago),
            is_read=state.get("is_read", False),
            read_at=state.get("read_at"),
            sender_deleted=state.get("sender_deleted", False),
            recipient_deleted=state.get("recipient_deleted", False),
        )
        test_db.add(message)
        await test_db.commit()
        return message
    return _make
