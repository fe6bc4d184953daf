"""
Use case: Add a book to the catalogue.

Input: CreateBookCommand (validated Book)
Output: the inserted Book, unchanged
Side effects: Inserts one row.
Failure cases: DuplicateBookError when the ISBN already exists.
"""

import logging

from bookcatalog.application.books.dtos import CreateBookCommand
from bookcatalog.domain.books.entities import Book
from bookcatalog.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)


class CreateBookUseCase:
    """Orchestrates inserting a new book.

    There are no server-generated fields: the stored record is exactly
    what the client sent.
    """

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def execute(self, command: CreateBookCommand) -> Book:
        """Insert the book and echo it back.

        Args:
            command: Command holding the book to insert.

        Returns:
            The inserted book.
        """
        self._book_repo.add(command.book)
        logger.info("Created book isbn=%s", command.book.isbn)
        return command.book
