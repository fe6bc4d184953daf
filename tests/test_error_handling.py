"""
Tests for the centralized error mapping, rate limiting and readiness.

Each failure path must end in a single ``{"message": ...}`` envelope.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from slowapi import Limiter
from slowapi.util import get_remote_address
from sqlalchemy.exc import OperationalError

from bookcatalog.domain.books.errors import CatalogError
from bookcatalog.domain.books.ports import BookRepository
from bookcatalog.infrastructure.database import Database
from bookcatalog.interfaces.books.dependencies import get_book_repository
from bookcatalog.main import create_app


def _unreachable_database() -> Database:
    """A Database whose engine fails every connection attempt."""
    engine = MagicMock()
    engine.begin.side_effect = OperationalError(
        "SELECT 1", {}, Exception("connection refused")
    )
    return Database(engine)


@pytest.fixture
def failing_repo() -> MagicMock:
    return MagicMock(spec=BookRepository)


def _client_with_repo(repo: MagicMock, database: Database) -> TestClient:
    app = create_app(database=database)
    app.dependency_overrides[get_book_repository] = lambda: repo
    return TestClient(app, raise_server_exceptions=False)


class TestServerErrors:
    """Tests for the 500 mappings."""

    def test_database_failure_returns_500(self) -> None:
        client = TestClient(create_app(database=_unreachable_database()))

        response = client.get("/books")

        assert response.status_code == 500
        assert response.json() == {"message": "Database operation failed"}

    def test_closed_database_returns_500(self, database: Database) -> None:
        database.dispose()
        client = TestClient(create_app(database=database))

        response = client.get("/books/0691161519")

        assert response.status_code == 500
        assert response.json() == {"message": "Database connection has been closed"}

    def test_catalog_error_returns_its_message(
        self, failing_repo: MagicMock, database: Database
    ) -> None:
        failing_repo.list_all.side_effect = CatalogError("Catalogue unavailable")
        client = _client_with_repo(failing_repo, database)

        response = client.get("/books")

        assert response.status_code == 500
        assert response.json() == {"message": "Catalogue unavailable"}

    def test_unexpected_error_hides_details(
        self, failing_repo: MagicMock, database: Database
    ) -> None:
        failing_repo.list_all.side_effect = RuntimeError("secret internals")
        client = _client_with_repo(failing_repo, database)

        response = client.get("/books")

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}


class TestRateLimiting:
    """Tests for rate limiting behavior."""

    def test_rate_limit_returns_429(self, seeded_database: Database) -> None:
        app = create_app(database=seeded_database)
        app.state.limiter = Limiter(key_func=get_remote_address, default_limits=["1/minute"])
        client = TestClient(app)

        first = client.get("/books")
        second = client.get("/books")

        assert first.status_code == 200
        assert second.status_code == 429
        assert second.json()["message"].startswith("Rate limit exceeded")


class TestReadiness:
    """Tests for GET /health."""

    def test_ready_when_database_answers(self, database: Database) -> None:
        client = TestClient(create_app(database=database))

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_unavailable_when_database_fails(self) -> None:
        client = TestClient(create_app(database=_unreachable_database()))

        response = client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unavailable"
