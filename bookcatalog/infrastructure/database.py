"""
Persistence accessor.

Wraps a SQLAlchemy engine and exposes a single query primitive used by
the repository adapters. Every statement runs with bound parameters
inside its own transaction, so single-row mutations are durable as soon
as ``execute`` returns.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from bookcatalog.core.config import Settings
from bookcatalog.domain.books.errors import IntegrityViolationError, PersistenceError

logger = logging.getLogger(__name__)

BOOKS_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS books (
    isbn TEXT PRIMARY KEY,
    amazon_url TEXT,
    author TEXT,
    language TEXT,
    pages INTEGER,
    publisher TEXT,
    title TEXT,
    year INTEGER
)
"""


@dataclass(frozen=True)
class QueryResult:
    """Outcome of a single statement.

    Attributes:
        rows: Result rows as plain dicts. Empty for statements that
            return no rows.
        rowcount: Number of rows affected by INSERT/UPDATE/DELETE.
    """

    rows: list[dict[str, Any]] = field(default_factory=list)
    rowcount: int = 0


class Database:
    """Owns the connection pool for the lifetime of the application.

    Constructed once at startup and released with ``dispose()`` at
    shutdown.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._disposed = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a Database from application settings."""
        engine = create_engine(settings.get_database_url(), pool_pre_ping=True)
        logger.info(
            "Database engine created for %s",
            engine.url.render_as_string(hide_password=True),
        )
        return cls(engine)

    @property
    def disposed(self) -> bool:
        return self._disposed

    def execute(self, query: str, params: Optional[dict[str, Any]] = None) -> QueryResult:
        """Run one parameterized statement.

        Args:
            query: SQL text using ``:name`` bind parameters.
            params: Values for the bind parameters.

        Returns:
            A QueryResult with the fetched rows and the affected-row count.

        Raises:
            IntegrityViolationError: If the statement breaks a constraint.
            PersistenceError: For any other database failure, or when the
                pool has already been released.
        """
        if self._disposed:
            raise PersistenceError("Database connection has been closed")

        try:
            with self._engine.begin() as conn:
                result = conn.execute(text(query), params or {})
                rows = [dict(row) for row in result.mappings()] if result.returns_rows else []
                return QueryResult(rows=rows, rowcount=result.rowcount)
        except IntegrityError as exc:
            logger.warning("Integrity violation: %s", exc.orig)
            raise IntegrityViolationError("Statement violates a table constraint") from exc
        except SQLAlchemyError as exc:
            logger.error("Database error (%s): %s", type(exc).__name__, exc)
            raise PersistenceError("Database operation failed") from exc

    def create_schema(self) -> None:
        """Create the books table if it does not exist yet."""
        self.execute(BOOKS_TABLE_DDL)
        logger.info("Ensured books table exists.")

    def dispose(self) -> None:
        """Release the connection pool. Later calls are no-ops."""
        if self._disposed:
            return
        self._engine.dispose()
        self._disposed = True
        logger.info("Database connection pool released.")
