"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, with no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        environment: Deployment environment (development, test, production).
        create_schema_on_startup: Create the books table when the app starts.
        rate_limit_enabled: Toggle the slowapi limiter.
        rate_limit_default: Default rate limit for all endpoints.

    The database connection string is the only environment-level surface
    the catalogue needs; it can be given whole (``DATABASE_URL``) or built
    from the postgres_* parts.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Book Catalog"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    environment: str = "development"
    create_schema_on_startup: bool = True
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "books"

    def get_database_url(self) -> str:
        """Return the effective database URL.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Built from postgres_* values. In the test environment the
           database name gets a ``_test`` suffix.
        """
        if self.database_url:
            return self.database_url
        db_name = self.postgres_db
        if self.environment == "test":
            db_name = f"{db_name}_test"
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{db_name}"
        )


settings = Settings()
