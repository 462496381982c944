"""Book Repository — SQL CRUD over the `books` table.

Invariants:
    - Each operation issues exactly one SQL statement, then commits
    - Records in and out are plain dicts with the eight book fields
    - update() never rewrites isbn: the path key identifies the row
    - delete_by_isbn() is a storage-level no-op when nothing matches (returns False)
    - IntegrityError on insert becomes DuplicateIsbnError after rollback

Design Decisions:
    - Session passed in by the caller: one repository per request, no module state
    - list_all orders by title then isbn so listings are stable across engines
"""

import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookshelf.core.domain_types import Isbn
from bookshelf.core.errors import BookNotFoundError, DuplicateIsbnError
from bookshelf.models.book import Book

logger = logging.getLogger(__name__)


class SqlBookRepository:
    """BookRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[dict]:
        result = await self.db.execute(
            select(Book).order_by(Book.title, Book.isbn),
        )
        return [book.to_dict() for book in result.scalars().all()]

    async def get_by_isbn(self, isbn: Isbn) -> dict:
        result = await self.db.execute(
            select(Book).where(Book.isbn == isbn),
        )
        book = result.scalar_one_or_none()
        if not book:
            raise BookNotFoundError(isbn)
        return book.to_dict()

    async def create(self, record: dict) -> dict:
        """Insert a new book. Raises DuplicateIsbnError on key collision."""
        try:
            await self.db.execute(insert(Book).values(**record))
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning(
                "Duplicate ISBN on insert", extra={"isbn": record["isbn"]},
            )
            raise DuplicateIsbnError(record["isbn"])
        logger.info("Book created", extra={"isbn": record["isbn"]})
        return dict(record)

    async def update(self, isbn: Isbn, record: dict) -> dict:
        """Overwrite every mutable field of the row keyed by isbn."""
        fields = {k: v for k, v in record.items() if k != "isbn"}
        result = await self.db.execute(
            update(Book).where(Book.isbn == isbn).values(**fields),
        )
        if result.rowcount == 0:
            await self.db.rollback()
            raise BookNotFoundError(isbn)
        await self.db.commit()
        logger.info("Book updated", extra={"isbn": isbn})
        return {"isbn": isbn, **fields}

    async def delete_by_isbn(self, isbn: Isbn) -> bool:
        """Delete the row keyed by isbn. Returns whether a row was removed."""
        result = await self.db.execute(
            delete(Book).where(Book.isbn == isbn),
        )
        await self.db.commit()
        deleted = result.rowcount > 0
        if deleted:
            logger.info("Book deleted", extra={"isbn": isbn})
        return deleted
