"""
Domain-specific errors for the books bounded context.

All errors raised from the domain and application layers are defined
here. They are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class CatalogError(Exception):
    """Base error for all catalogue errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class BookNotFoundError(CatalogError):
    """Raised when no book matches the requested ISBN."""

    def __init__(self, isbn: str) -> None:
        super().__init__(f"There is no book with an isbn '{isbn}'")
        self.isbn = isbn


class BookValidationError(CatalogError):
    """Raised when a request body violates the book schema.

    Carries every violation found, not just the first one.
    """

    def __init__(self, violations: list[str]) -> None:
        super().__init__("; ".join(violations))
        self.violations = violations


class PersistenceError(CatalogError):
    """Raised when the backing store fails to execute a query."""


class IntegrityViolationError(PersistenceError):
    """Raised when a statement breaks a table constraint."""


class DuplicateBookError(PersistenceError):
    """Raised when creating a book whose ISBN is already taken."""

    def __init__(self, isbn: str) -> None:
        super().__init__(f"There is already a book with an isbn '{isbn}'")
        self.isbn = isbn
