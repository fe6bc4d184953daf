"""
Pydantic schemas for the books API responses.

These schemas define the response side of the API contract. Request
bodies are checked by the validation contract in ``validation`` so
that every violation can be reported at once.
No business logic belongs here.
"""

from pydantic import BaseModel, ConfigDict


class BookItem(BaseModel):
    """A single book as returned by the API.

    ``pages`` and ``year`` are JSON numbers.
    """

    model_config = ConfigDict(from_attributes=True)

    isbn: str
    amazon_url: str
    author: str
    language: str
    pages: int | float
    publisher: str
    title: str
    year: int | float


class BookResponse(BaseModel):
    """Response schema for endpoints returning one book."""

    book: BookItem


class BookListResponse(BaseModel):
    """Response schema for the list endpoint."""

    books: list[BookItem]


class MessageResponse(BaseModel):
    """Response schema for endpoints that only confirm an action."""

    message: str


class ErrorResponse(BaseModel):
    """Standard error envelope returned by all error handlers.

    ``message`` is a list of violations for validation failures and a
    single string otherwise.
    """

    message: str | list[str]


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
