"""
Use case: Remove a book from the catalogue.

Input: DeleteBookCommand (isbn)
Output: None
Side effects: Deletes one row.
Failure cases: BookNotFoundError when no row was deleted. Deleting the
same ISBN twice therefore fails the second time.
"""

import logging

from bookcatalog.application.books.dtos import DeleteBookCommand
from bookcatalog.domain.books.errors import BookNotFoundError
from bookcatalog.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)


class DeleteBookUseCase:
    """Orchestrates deleting a book by ISBN."""

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def execute(self, command: DeleteBookCommand) -> None:
        """Delete the book or raise if nothing matched.

        Raises:
            BookNotFoundError: If no row had the ISBN.
        """
        if not self._book_repo.delete(command.isbn):
            raise BookNotFoundError(command.isbn)
        logger.info("Deleted book isbn=%s", command.isbn)
