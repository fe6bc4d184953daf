"""
Port interfaces (ABCs) for the books bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from bookcatalog.domain.books.entities import Book


class BookRepository(ABC):
    """Port for persisting and retrieving books."""

    @abstractmethod
    def list_all(self) -> list[Book]:
        """Return every book ordered by title ascending."""
        raise NotImplementedError

    @abstractmethod
    def get(self, isbn: str) -> Optional[Book]:
        """Return the book with the given ISBN, or None."""
        raise NotImplementedError

    @abstractmethod
    def add(self, book: Book) -> None:
        """Insert a new book.

        Raises:
            DuplicateBookError: If a book with the same ISBN exists.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, book: Book) -> bool:
        """Overwrite the mutable fields of the row keyed on ``book.isbn``.

        Returns:
            True if a row was updated, False if none matched.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, isbn: str) -> bool:
        """Delete the book with the given ISBN.

        Returns:
            True if a row was removed, False if none matched.
        """
        raise NotImplementedError
