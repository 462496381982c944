"""Book ORM — the single persisted entity, keyed by ISBN.

Invariants:
    - isbn is the text primary key (supplied by the client, never generated)
    - All eight columns are NOT NULL
    - to_dict() returns exactly the eight API fields
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from bookshelf.db.base import Base


class Book(Base):
    """A book row in the `books` table."""
    __tablename__ = "books"

    isbn: Mapped[str] = mapped_column(Text, primary_key=True)
    amazon_url: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(Text, nullable=False)
    language: Mapped[str] = mapped_column(Text, nullable=False)
    pages: Mapped[int] = mapped_column(Integer, nullable=False)
    publisher: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    def to_dict(self) -> dict:
        return {
            "isbn": self.isbn,
            "amazon_url": self.amazon_url,
            "author": self.author,
            "language": self.language,
            "pages": self.pages,
            "publisher": self.publisher,
            "title": self.title,
            "year": self.year,
        }
