"""
Adapter: Book repository.

Implements BookRepository port.
Maps Book entities to and from rows of the books table.
"""

import logging
from typing import Optional

from bookcatalog.domain.books.entities import Book
from bookcatalog.domain.books.errors import DuplicateBookError, IntegrityViolationError
from bookcatalog.domain.books.ports import BookRepository
from bookcatalog.infrastructure.database import Database

logger = logging.getLogger(__name__)

BOOK_COLUMNS = "isbn, amazon_url, author, language, pages, publisher, title, year"


class BookRepositoryAdapter(BookRepository):
    """Reads and writes books through the shared Database accessor.

    Implements the BookRepository port defined in the domain layer.
    """

    def __init__(self, database: Database) -> None:
        self._db = database

    def list_all(self) -> list[Book]:
        """Return every book, ordered by title (isbn breaks ties)."""
        result = self._db.execute(
            f"""
            SELECT {BOOK_COLUMNS}
            FROM books
            ORDER BY title, isbn
            """
        )
        return [Book.from_mapping(row) for row in result.rows]

    def get(self, isbn: str) -> Optional[Book]:
        """Return the book with the given ISBN, or None."""
        result = self._db.execute(
            f"""
            SELECT {BOOK_COLUMNS}
            FROM books
            WHERE isbn = :isbn
            """,
            {"isbn": isbn},
        )
        if not result.rows:
            return None
        return Book.from_mapping(result.rows[0])

    def add(self, book: Book) -> None:
        """Insert a new row holding all eight fields.

        Raises:
            DuplicateBookError: If the ISBN is already taken.
        """
        try:
            self._db.execute(
                f"""
                INSERT INTO books ({BOOK_COLUMNS})
                VALUES (:isbn, :amazon_url, :author, :language,
                        :pages, :publisher, :title, :year)
                """,
                book.to_dict(),
            )
        except IntegrityViolationError as exc:
            raise DuplicateBookError(book.isbn) from exc

    def update(self, book: Book) -> bool:
        """Overwrite every mutable column of the row keyed on isbn.

        Returns:
            True if the row still existed, False if none matched.
        """
        result = self._db.execute(
            """
            UPDATE books
            SET amazon_url = :amazon_url,
                author = :author,
                language = :language,
                pages = :pages,
                publisher = :publisher,
                title = :title,
                year = :year
            WHERE isbn = :isbn
            """,
            book.to_dict(),
        )
        logger.debug("Updated %d row(s) for isbn=%s", result.rowcount, book.isbn)
        return result.rowcount > 0

    def delete(self, isbn: str) -> bool:
        """Delete the row keyed on isbn and report whether one existed."""
        result = self._db.execute(
            "DELETE FROM books WHERE isbn = :isbn",
            {"isbn": isbn},
        )
        return result.rowcount > 0
