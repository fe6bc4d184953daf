"""
FastAPI router for the books bounded context.

All routes delegate to use cases. No business logic here.
Request bodies are checked against the validation contract before any
use case runs. Error mapping is handled by centralized error handlers.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from bookcatalog.application.books.create_book import CreateBookUseCase
from bookcatalog.application.books.delete_book import DeleteBookUseCase
from bookcatalog.application.books.dtos import (
    CreateBookCommand,
    DeleteBookCommand,
    GetBookQuery,
    UpdateBookCommand,
)
from bookcatalog.application.books.get_book import GetBookUseCase
from bookcatalog.application.books.list_books import ListBooksUseCase
from bookcatalog.application.books.update_book import UpdateBookUseCase
from bookcatalog.domain.books.entities import Book
from bookcatalog.interfaces.books.dependencies import (
    get_body_sent,
    get_create_book_use_case,
    get_delete_book_use_case,
    get_get_book_use_case,
    get_list_books_use_case,
    get_update_book_use_case,
)
from bookcatalog.interfaces.books.schemas import (
    BookItem,
    BookListResponse,
    BookResponse,
    ErrorResponse,
    MessageResponse,
)
from bookcatalog.interfaces.books.validation import (
    BOOK_SCHEMA,
    BOOK_UPDATE_SCHEMA,
    validate_book,
)

router = APIRouter(prefix="/books", tags=["books"])


def _body_or_empty(payload: Any, body_sent: bool) -> Any:
    # A request without a body is validated as an empty object; an
    # explicit JSON null is validated as it is.
    if payload is None and not body_sent:
        return {}
    return payload


@router.get(
    "",
    response_model=BookListResponse,
    summary="List books",
    description="Return every book in the catalogue, ordered by title.",
)
def list_books(
    use_case: ListBooksUseCase = Depends(get_list_books_use_case),
) -> BookListResponse:
    """List all books."""
    books = use_case.execute()
    return BookListResponse(books=[BookItem.model_validate(b) for b in books])


@router.get(
    "/{isbn}",
    response_model=BookResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a book",
    description="Return the book identified by its ISBN.",
)
def get_book(
    isbn: str,
    use_case: GetBookUseCase = Depends(get_get_book_use_case),
) -> BookResponse:
    """Get a book by ISBN."""
    book = use_case.execute(GetBookQuery(isbn=isbn))
    return BookResponse(book=BookItem.model_validate(book))


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Create a book",
    description="Validate a complete book record and add it to the catalogue.",
)
def create_book(
    payload: Any = Body(default=None),
    body_sent: bool = Depends(get_body_sent),
    use_case: CreateBookUseCase = Depends(get_create_book_use_case),
) -> BookResponse:
    """Create a new book."""
    data = validate_book(_body_or_empty(payload, body_sent), BOOK_SCHEMA)
    book = use_case.execute(CreateBookCommand(book=Book.from_mapping(data)))
    return BookResponse(book=BookItem.model_validate(book))


@router.put(
    "/{isbn}",
    response_model=BookResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update a book",
    description=(
        "Overwrite the supplied fields of an existing book. "
        "Fields that are not sent keep their stored values."
    ),
)
def update_book(
    isbn: str,
    payload: Any = Body(default=None),
    body_sent: bool = Depends(get_body_sent),
    use_case: UpdateBookUseCase = Depends(get_update_book_use_case),
) -> BookResponse:
    """Partially update a book."""
    changes = validate_book(_body_or_empty(payload, body_sent), BOOK_UPDATE_SCHEMA)
    book = use_case.execute(UpdateBookCommand(isbn=isbn, changes=changes))
    return BookResponse(book=BookItem.model_validate(book))


@router.delete(
    "/{isbn}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Delete a book",
)
def delete_book(
    isbn: str,
    use_case: DeleteBookUseCase = Depends(get_delete_book_use_case),
) -> MessageResponse:
    """Delete a book by ISBN."""
    use_case.execute(DeleteBookCommand(isbn=isbn))
    return MessageResponse(message="Book deleted")
