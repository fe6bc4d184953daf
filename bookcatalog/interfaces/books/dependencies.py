"""
Dependency injection for the books bounded context.

Provides FastAPI dependency functions that wire the application's
Database into the repository adapter and the adapter into use cases
via constructor injection.
"""

from fastapi import Depends, Request

from bookcatalog.application.books.create_book import CreateBookUseCase
from bookcatalog.application.books.delete_book import DeleteBookUseCase
from bookcatalog.application.books.get_book import GetBookUseCase
from bookcatalog.application.books.list_books import ListBooksUseCase
from bookcatalog.application.books.update_book import UpdateBookUseCase
from bookcatalog.domain.books.ports import BookRepository
from bookcatalog.infrastructure.books.book_repository import BookRepositoryAdapter
from bookcatalog.infrastructure.database import Database


def get_database(request: Request) -> Database:
    """Return the Database built by the composition root."""
    return request.app.state.database


def get_book_repository(database: Database = Depends(get_database)) -> BookRepository:
    """Build the book repository on top of the shared Database."""
    return BookRepositoryAdapter(database)


def get_list_books_use_case(
    book_repo: BookRepository = Depends(get_book_repository),
) -> ListBooksUseCase:
    """Build ListBooksUseCase with its infrastructure dependencies."""
    return ListBooksUseCase(book_repo=book_repo)


def get_get_book_use_case(
    book_repo: BookRepository = Depends(get_book_repository),
) -> GetBookUseCase:
    """Build GetBookUseCase with its infrastructure dependencies."""
    return GetBookUseCase(book_repo=book_repo)


def get_create_book_use_case(
    book_repo: BookRepository = Depends(get_book_repository),
) -> CreateBookUseCase:
    """Build CreateBookUseCase with its infrastructure dependencies."""
    return CreateBookUseCase(book_repo=book_repo)


def get_update_book_use_case(
    book_repo: BookRepository = Depends(get_book_repository),
) -> UpdateBookUseCase:
    """Build UpdateBookUseCase with its infrastructure dependencies."""
    return UpdateBookUseCase(book_repo=book_repo)


def get_delete_book_use_case(
    book_repo: BookRepository = Depends(get_book_repository),
) -> DeleteBookUseCase:
    """Build DeleteBookUseCase with its infrastructure dependencies."""
    return DeleteBookUseCase(book_repo=book_repo)


async def get_body_sent(request: Request) -> bool:
    """Tell a request without a body apart from one whose body is ``null``."""
    return bool((await request.body()).strip())
