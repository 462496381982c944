"""API test fixtures — FastAPI test client over the in-memory database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so readiness checks see the test engine
    - seed_book inserts the canonical book before the test body runs

Design Decisions:
    - ASGITransport does not run lifespan: no PostgreSQL engine is ever created
"""

import pytest
from httpx import ASGITransport, AsyncClient

import bookshelf.infrastructure.database as db_module
from bookshelf.infrastructure.database import DatabaseSessionManager, get_db
from bookshelf.main import app
from bookshelf.models.book import Book


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


@pytest.fixture
async def seed_book(test_db, book_payload):
    """Insert the canonical book directly into the test DB."""
    book = Book(**book_payload)
    test_db.add(book)
    await test_db.commit()
    return book_payload
