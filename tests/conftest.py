"""
Shared fixtures for the book catalog tests.

The API tests run against an in-memory SQLite database reached through
the same Database accessor the application uses in production. Each
test gets a fresh database seeded with two books.
"""

import os

os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from bookcatalog.infrastructure.books.book_repository import BookRepositoryAdapter  # noqa: E402
from bookcatalog.infrastructure.database import Database  # noqa: E402
from bookcatalog.main import create_app  # noqa: E402
from tests.sample_books import FAHRENHEIT, POWER_UP  # noqa: E402


@pytest.fixture
def database() -> Database:
    """A Database on a private in-memory SQLite engine with the books table."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db = Database(engine)
    db.create_schema()
    yield db
    db.dispose()


@pytest.fixture
def seeded_database(database: Database) -> Database:
    """The database pre-filled with the two reference books."""
    repo = BookRepositoryAdapter(database)
    repo.add(POWER_UP)
    repo.add(FAHRENHEIT)
    return database


@pytest.fixture
def client(seeded_database: Database) -> TestClient:
    """A TestClient running the full application lifespan."""
    app = create_app(database=seeded_database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def new_book() -> dict:
    """A complete, valid request body for a book not in the database."""
    return {
        "isbn": "01234567890",
        "amazon_url": "http://a.co/eobPtX2",
        "author": "Tony Kushner",
        "language": "english",
        "pages": 103,
        "publisher": "American Theatre Company",
        "title": "Angels In America",
        "year": 1991,
    }
