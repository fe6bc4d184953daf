"""
CLI entry point for the book catalog.

Usage:
    # Create the books table in the configured database
    python -m bookcatalog.cli init-db

    # Serve the API
    python -m bookcatalog.cli serve --port 8000
"""

import argparse
import logging
from typing import Optional, Sequence

from bookcatalog.core.config import settings
from bookcatalog.infrastructure.database import Database
from bookcatalog.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_init_db(args: argparse.Namespace) -> None:
    """Create the books table if it does not exist."""
    database = Database.from_settings(settings)
    try:
        database.create_schema()
    finally:
        database.dispose()
    logger.info("Database ready.")


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API server."""
    import uvicorn

    logger.info("Starting Book Catalog at http://%s:%d", args.host, args.port)
    uvicorn.run("bookcatalog.main:app", host=args.host, port=args.port, reload=args.reload)


def main(argv: Optional[Sequence[str]] = None) -> None:
    configure_logging(level=settings.log_level)

    parser = argparse.ArgumentParser(description="Book Catalog CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init-db", help="Create the books table")
    init_parser.set_defaults(func=cmd_init_db)

    serve_parser = subparsers.add_parser("serve", help="Serve the REST API")
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--reload", action="store_true")
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
