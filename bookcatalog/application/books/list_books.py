"""
Use case: List the whole catalogue.

Input: none
Output: list[Book] ordered by title ascending
Side effects: None (read-only query).
Failure cases: PersistenceError from the repository.
"""

import logging

from bookcatalog.domain.books.entities import Book
from bookcatalog.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)


class ListBooksUseCase:
    """Orchestrates listing every book in the catalogue."""

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def execute(self) -> list[Book]:
        """Return all books, ordered by title."""
        books = self._book_repo.list_all()
        logger.debug("Listed %d books.", len(books))
        return books
