"""
Tests for the books domain layer.

Tests domain entities and error classes in isolation.
No external dependencies or IO required.
"""

from bookcatalog.domain.books.entities import MUTABLE_FIELDS, Book
from bookcatalog.domain.books.errors import (
    BookNotFoundError,
    BookValidationError,
    CatalogError,
    DuplicateBookError,
    PersistenceError,
)
from tests.sample_books import FAHRENHEIT


class TestBookEntity:
    """Tests for the Book entity."""

    def test_round_trips_through_mapping(self) -> None:
        assert Book.from_mapping(FAHRENHEIT.to_dict()) == FAHRENHEIT

    def test_from_mapping_ignores_extra_keys(self) -> None:
        data = {**FAHRENHEIT.to_dict(), "rowid": 7}
        assert Book.from_mapping(data) == FAHRENHEIT

    def test_merge_replaces_only_supplied_fields(self) -> None:
        merged = FAHRENHEIT.merged_with({"author": "Ray Brad", "language": "german"})

        assert merged.author == "Ray Brad"
        assert merged.language == "german"
        assert merged.title == FAHRENHEIT.title
        assert merged.pages == FAHRENHEIT.pages

    def test_merge_never_changes_isbn(self) -> None:
        merged = FAHRENHEIT.merged_with({"isbn": "999", "year": 2000})

        assert merged.isbn == FAHRENHEIT.isbn
        assert merged.year == 2000

    def test_isbn_is_not_mutable(self) -> None:
        assert "isbn" not in MUTABLE_FIELDS
        assert len(MUTABLE_FIELDS) == 7


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_not_found_message(self) -> None:
        error = BookNotFoundError("0")
        assert error.message == "There is no book with an isbn '0'"
        assert error.isbn == "0"

    def test_validation_error_keeps_every_violation(self) -> None:
        error = BookValidationError(["a", "b"])
        assert error.violations == ["a", "b"]

    def test_duplicate_is_a_persistence_error(self) -> None:
        error = DuplicateBookError("123")
        assert isinstance(error, PersistenceError)
        assert isinstance(error, CatalogError)
        assert "123" in error.message
