"""Books Routes — CRUD endpoints for the book resource.

Invariants:
    - Write bodies are validated by Pydantic (BookCreate) before reaching the handler
    - Path isbn is authoritative for GET/PUT/DELETE; nothing is special-cased
    - Failures surface as BookshelfError subclasses (rendered by api/error_handlers.py)
    - DELETE of an absent isbn is 404, so repeated deletes never raise 500

Design Decisions:
    - Rejected bodies are rendered by the RequestValidationError handler as the
      ordered message list, not FastAPI's default 422
    - Repository built per request from get_db: no module-level connection
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from bookshelf.core.domain_types import Isbn
from bookshelf.core.errors import BookNotFoundError
from bookshelf.core.repository_protocols import BookRepository
from bookshelf.infrastructure.database import get_db
from bookshelf.schemas.book import (
    BookCreate,
    BookEnvelope,
    BookListEnvelope,
    MessageEnvelope,
)
from bookshelf.services.book_repository import SqlBookRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/books", tags=["books"])


def get_book_repository(db: AsyncSession = Depends(get_db)) -> BookRepository:
    """FastAPI dependency: repository bound to the request's session."""
    return SqlBookRepository(db)


@router.get("", response_model=BookListEnvelope)
async def list_books(repo: BookRepository = Depends(get_book_repository)):
    """List every book."""
    return {"books": await repo.list_all()}


@router.get("/{isbn}", response_model=BookEnvelope)
async def get_book(
    isbn: str, repo: BookRepository = Depends(get_book_repository),
):
    """Get one book by ISBN."""
    return {"book": await repo.get_by_isbn(Isbn(isbn))}


@router.post(
    "", response_model=BookEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_book(
    body: BookCreate,
    repo: BookRepository = Depends(get_book_repository),
):
    """Create a book from a full payload."""
    return {"book": await repo.create(body.model_dump())}


@router.put("/{isbn}", response_model=BookEnvelope)
async def update_book(
    isbn: str,
    body: BookCreate,
    repo: BookRepository = Depends(get_book_repository),
):
    """Overwrite a book's fields. The path ISBN identifies the row."""
    return {"book": await repo.update(Isbn(isbn), body.model_dump())}


@router.delete("/{isbn}", response_model=MessageEnvelope)
async def delete_book(
    isbn: str, repo: BookRepository = Depends(get_book_repository),
):
    """Delete a book by ISBN."""
    if not await repo.delete_by_isbn(Isbn(isbn)):
        raise BookNotFoundError(isbn)
    return {"message": "Book deleted"}
