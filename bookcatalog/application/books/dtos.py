"""
Data Transfer Objects for the books application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from typing import Any

from bookcatalog.domain.books.entities import Book


@dataclass(frozen=True)
class GetBookQuery:
    """Input DTO for looking up a single book.

    Attributes:
        isbn: ISBN taken from the request path.
    """

    isbn: str


@dataclass(frozen=True)
class CreateBookCommand:
    """Input DTO for creating a book.

    Attributes:
        book: The fully validated book to insert.
    """

    book: Book


@dataclass(frozen=True)
class UpdateBookCommand:
    """Input DTO for a partial update.

    Attributes:
        isbn: ISBN taken from the request path; identifies the record.
        changes: Validated fields to overwrite. Absent keys keep their
            stored values.
    """

    isbn: str
    changes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeleteBookCommand:
    """Input DTO for deleting a book.

    Attributes:
        isbn: ISBN taken from the request path.
    """

    isbn: str
