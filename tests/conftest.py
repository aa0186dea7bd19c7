"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database. The app's session and
settings dependencies are overridden to point at it.
"""
import os

# Settings are read at import time by db.session; give it a harmless database.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from api.main import app  # noqa: E402
from core.config import Settings, get_settings  # noqa: E402
from db.session import create_tables, get_async_session  # noqa: E402
from models.bookmark import Bookmark  # noqa: E402
from schemas.bookmark import BookmarkRecord  # noqa: E402

TEST_API_TOKEN = "test-api-token"
TEST_DATABASE_URL = "sqlite+aiosqlite://"


def make_bookmarks() -> list[dict]:
    """Five valid bookmarks, without ids."""
    return [
        {
            "title": "Thinkful",
            "url": "https://www.thinkful.com",
            "description": "Think outside the classroom",
            "rating": 5,
        },
        {
            "title": "Google",
            "url": "https://www.google.com",
            "description": "Where we find everything else",
            "rating": 4,
        },
        {
            "title": "MDN",
            "url": "https://developer.mozilla.org",
            "description": "The only place to find web documentation",
            "rating": 5,
        },
        {
            "title": "Python Docs",
            "url": "https://docs.python.org",
            "description": "Batteries included",
            "rating": 3,
        },
        {
            "title": "Hacker News",
            "url": "https://news.ycombinator.com",
            "description": "Links and arguments",
            "rating": 1,
        },
    ]


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """A single-connection in-memory database with the schema created."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    """A session for calling the service layer directly."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def settings() -> Settings:
    """Settings used by the app under test."""
    return Settings(database_url=TEST_DATABASE_URL, api_token=TEST_API_TOKEN)


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
    settings: Settings,
) -> AsyncGenerator[AsyncClient]:
    """HTTP client for the app, authenticated with the test token."""

    async def override_get_async_session() -> AsyncGenerator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_async_session] = override_get_async_session
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"Authorization": f"Bearer {TEST_API_TOKEN}"},
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def seed_bookmarks(
    session_factory: async_sessionmaker[AsyncSession],
) -> list[dict]:
    """Insert `make_bookmarks()` directly and return the rows (with ids) as dicts."""
    async with session_factory() as session:
        bookmarks = [Bookmark(**data) for data in make_bookmarks()]
        session.add_all(bookmarks)
        await session.commit()
        return [BookmarkRecord.model_validate(b).model_dump() for b in bookmarks]
