"""
MongoDB Connection Management Module

Provides the document store client lifecycle (pymongo async API).
"""

import logging
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from crud_backend.config import get_settings
from crud_backend.db.security import check_connection_security

logger = logging.getLogger(__name__)

# Global MongoDB client and database instances
_mongo_client: Optional[AsyncMongoClient] = None
_mongo_database: Optional[AsyncDatabase] = None


async def init_mongo() -> None:
    """
    Initialize MongoDB Connection

    Creates the client from MONGO_URI and verifies connectivity with a ping.
    Called during application startup.
    """
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        logger.warning("MongoDB client already initialized")
        return

    settings = get_settings()
    check_connection_security(settings.MONGO_URI, "MongoDB")
    # tz_aware: datetimes come back as UTC-aware values
    _mongo_client = AsyncMongoClient(settings.MONGO_URI, tz_aware=True)
    _mongo_database = _mongo_client[settings.MONGO_DB_NAME]

    await _mongo_client.admin.command("ping")
    logger.info("Connected to MongoDB database: %s", settings.MONGO_DB_NAME)


async def close_mongo() -> None:
    """
    Close MongoDB Connection

    Should be called during application shutdown.
    """
    global _mongo_client, _mongo_database

    if _mongo_client is None:
        return

    await _mongo_client.close()
    _mongo_client = None
    _mongo_database = None
    logger.info("MongoDB connection closed")


def get_mongo_database() -> AsyncDatabase:
    """
    Get MongoDB Database Instance

    Raises:
        RuntimeError: If MongoDB has not been initialized
    """
    if _mongo_database is None:
        raise RuntimeError(
            "MongoDB client not initialized. Ensure init_mongo() has been called."
        )
    return _mongo_database
