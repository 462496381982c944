"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from bookshelf.core.domain_types import Isbn


class BookRepository(Protocol):
    """Contract for book persistence — implemented by services/book_repository.py."""
    async def list_all(self) -> list[dict]: ...
    async def get_by_isbn(self, isbn: Isbn) -> dict: ...
    async def create(self, record: dict) -> dict: ...
    async def update(self, isbn: Isbn, record: dict) -> dict: ...
    async def delete_by_isbn(self, isbn: Isbn) -> bool: ...
