"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
Every error response is a single ``{"message": ...}`` envelope.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookcatalog.domain.books.errors import (
    BookNotFoundError,
    BookValidationError,
    CatalogError,
    DuplicateBookError,
    PersistenceError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500


def _error_response(status_code: int, message: str | list[str]) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"message": message})


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(BookValidationError)
    async def handle_book_validation(
        _request: Request, exc: BookValidationError
    ) -> JSONResponse:
        """Handle request bodies that violate the book schema."""
        logger.warning("Book validation failed with %d violation(s)", len(exc.violations))
        return _error_response(HTTP_400, exc.violations)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle bodies FastAPI could not decode (e.g. malformed JSON)."""
        messages = [str(error.get("msg", "Invalid request")) for error in exc.errors()]
        logger.warning("Request could not be decoded: %s", messages)
        return _error_response(HTTP_400, messages)

    @app.exception_handler(BookNotFoundError)
    async def handle_book_not_found(
        _request: Request, exc: BookNotFoundError
    ) -> JSONResponse:
        """Handle lookups of unknown ISBNs."""
        logger.warning("Book not found: %s", exc.isbn)
        return _error_response(HTTP_404, exc.message)

    @app.exception_handler(DuplicateBookError)
    async def handle_duplicate_book(
        _request: Request, exc: DuplicateBookError
    ) -> JSONResponse:
        """Handle inserts of an ISBN that is already taken."""
        logger.warning("Duplicate book: %s", exc.isbn)
        return _error_response(HTTP_409, exc.message)

    @app.exception_handler(PersistenceError)
    async def handle_persistence(
        _request: Request, exc: PersistenceError
    ) -> JSONResponse:
        """Handle database failures. Driver details stay in the logs."""
        logger.error("Persistence error: %s", exc.message)
        return _error_response(HTTP_500, exc.message)

    @app.exception_handler(CatalogError)
    async def handle_catalog(
        _request: Request, exc: CatalogError
    ) -> JSONResponse:
        """Catch-all for unhandled catalogue errors."""
        logger.error("Unhandled catalog error: %s", exc.message)
        return _error_response(HTTP_500, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
