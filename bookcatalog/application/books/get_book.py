"""
Use case: Retrieve a single book by ISBN.

Input: GetBookQuery (isbn)
Output: Book
Side effects: None (read-only query).
Failure cases: BookNotFoundError when no row matches.
"""

import logging

from bookcatalog.application.books.dtos import GetBookQuery
from bookcatalog.domain.books.entities import Book
from bookcatalog.domain.books.errors import BookNotFoundError
from bookcatalog.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)


class GetBookUseCase:
    """Orchestrates looking up one book by its ISBN."""

    def __init__(self, book_repo: BookRepository) -> None:
        """Initialize the use case.

        Args:
            book_repo: Repository for reading books.
        """
        self._book_repo = book_repo

    def execute(self, query: GetBookQuery) -> Book:
        """Run the get book use case.

        Args:
            query: Query holding the ISBN to look up.

        Returns:
            The matching book.

        Raises:
            BookNotFoundError: If the ISBN is unknown.
        """
        book = self._book_repo.get(query.isbn)
        if book is None:
            logger.info("Book not found: isbn=%s", query.isbn)
            raise BookNotFoundError(query.isbn)
        return book
