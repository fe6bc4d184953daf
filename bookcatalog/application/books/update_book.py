"""
Use case: Partially update a book.

Input: UpdateBookCommand (isbn, changes)
Output: the fully merged Book
Side effects: Updates one row.
Failure cases: BookNotFoundError when no row matches the path ISBN.
"""

import logging

from bookcatalog.application.books.dtos import GetBookQuery, UpdateBookCommand
from bookcatalog.application.books.get_book import GetBookUseCase
from bookcatalog.domain.books.entities import Book
from bookcatalog.domain.books.errors import BookNotFoundError
from bookcatalog.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)


class UpdateBookUseCase:
    """Orchestrates merging supplied fields into a stored book.

    The lookup reuses GetBookUseCase so a missing book fails exactly
    like a GET does. Only mutable fields are merged; an ``isbn`` in the
    changes never renames the record.
    """

    def __init__(self, book_repo: BookRepository) -> None:
        """Initialize the use case.

        Args:
            book_repo: Repository for reading and updating books.
        """
        self._book_repo = book_repo
        self._get_book = GetBookUseCase(book_repo)

    def execute(self, command: UpdateBookCommand) -> Book:
        """Run the update use case.

        Args:
            command: Command holding the path ISBN and the changes.

        Returns:
            The merged book as persisted.

        Raises:
            BookNotFoundError: If the ISBN is unknown, or the row was
                deleted between the lookup and the update.
        """
        existing = self._get_book.execute(GetBookQuery(isbn=command.isbn))
        merged = existing.merged_with(command.changes)
        if not self._book_repo.update(merged):
            raise BookNotFoundError(command.isbn)
        logger.info(
            "Updated book isbn=%s fields=%s",
            merged.isbn,
            sorted(k for k in command.changes if k != "isbn"),
        )
        return merged
