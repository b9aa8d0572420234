"""
Configuration Management Module

Configures application parameters via environment variables or .env file.
Documents live in MongoDB; activity logs (and the database cache store)
live in SQLite (default) or PostgreSQL.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application Configuration Class

    All configuration items can be overridden by environment variables, with names matching fields (uppercase).
    """

    # Application Config
    APP_NAME: str = "CRUD Backend"
    DEBUG: bool = False
    # Overrides the level derived from DEBUG, e.g. "WARNING"
    LOG_LEVEL: Optional[str] = None

    # SQL Database Config (activity logs, database cache store)
    # Supports "sqlite" or "postgresql"
    DATABASE_TYPE: Literal["sqlite", "postgresql"] = "sqlite"
    # SQLite default database path, PostgreSQL requires full connection string
    DATABASE_URL: str = "sqlite+aiosqlite:///./crud_backend.db"

    # Document Store Config
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "crud_backend"

    # Cache Config
    # Cache backend: "database" uses the SQL database, "redis" uses Redis
    CACHE_STORE_TYPE: Literal["database", "redis"] = "database"
    # Redis connection URL (only used when CACHE_STORE_TYPE is "redis")
    REDIS_URL: str = "redis://localhost:6379/0"
    # Lifetime of cached query results (seconds)
    CACHE_TTL_SECONDS: int = 300
    # Namespace of cache keys in a shared Redis
    CACHE_KEY_PREFIX: str = "crud_backend:"

    # Pagination Config
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 1000

    # Activity Log Config
    # Activity log retention days (default 90 days)
    ACTIVITY_LOG_RETENTION_DAYS: int = 90
    # Activity log cleanup interval in hours (default 24 hours)
    ACTIVITY_LOG_CLEANUP_INTERVAL_HOURS: int = 24

    # CORS Config
    # Comma-separated list of allowed origins for CORS
    # Example: "http://localhost:3000,https://example.com"
    ALLOWED_ORIGINS: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get application configuration (Singleton)

    Uses lru_cache to ensure configuration is loaded only once.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
