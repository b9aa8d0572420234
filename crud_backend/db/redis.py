"""
Redis Connection Management Module

Client lifecycle for the Redis cache store (CACHE_STORE_TYPE="redis").
"""

import logging
from typing import Optional

from redis.asyncio import Redis

from crud_backend.config import get_settings
from crud_backend.db.security import check_connection_security

logger = logging.getLogger(__name__)

# Global Redis client instance
_redis_client: Optional[Redis] = None


async def init_redis() -> None:
    """
    Initialize Redis Connection

    Responses are decoded to str, matching what the cache store writes.
    """
    global _redis_client

    if _redis_client is not None:
        logger.warning("Redis client already initialized")
        return

    settings = get_settings()
    check_connection_security(settings.REDIS_URL, "Redis")

    _redis_client = Redis.from_url(settings.REDIS_URL, decode_responses=True)
    await _redis_client.ping()
    logger.info("Redis cache store connected")


async def close_redis() -> None:
    """Close the Redis connection pool. Called on application shutdown."""
    global _redis_client

    if _redis_client is None:
        return

    await _redis_client.aclose()
    _redis_client = None
    logger.info("Redis connection closed")


def get_redis() -> Redis:
    """
    Get Redis Client Instance

    Raises:
        RuntimeError: If Redis has not been initialized
    """
    if _redis_client is None:
        raise RuntimeError(
            "Redis client not initialized. "
            "Set CACHE_STORE_TYPE=redis so init_redis() runs at startup."
        )
    return _redis_client
