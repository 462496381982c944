"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Tests never reach a real PostgreSQL: DATABASE_URL defaults to SQLite
    - Every test gets a fresh in-memory SQLite database built from Base.metadata

Design Decisions:
    - StaticPool: all sessions share the single in-memory connection,
      otherwise each new connection would see an empty database
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from bookshelf import models  # noqa: E402,F401
from bookshelf.db.base import Base  # noqa: E402


BOOK_1 = {
    "isbn": "1234567890",
    "amazon_url": "test.com",
    "author": "me",
    "language": "en",
    "pages": 100,
    "publisher": "Houghton",
    "title": "Best Book Ever",
    "year": 2000,
}


@pytest.fixture
def book_payload() -> dict:
    """A fresh copy of the canonical valid book payload."""
    return dict(BOOK_1)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
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
