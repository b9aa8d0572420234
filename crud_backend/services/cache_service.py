"""
Cache Service Module

Key-based get/set/delete cache over a key-value store backend.
"""

import json
import logging
from typing import Any, Optional

from crud_backend.common.utils import to_jsonable
from crud_backend.config import get_settings
from crud_backend.repositories.kv_store_repo import KVStoreRepository

logger = logging.getLogger(__name__)


class CacheService:
    """
    Cache Service

    Values are stored JSON-encoded; pydantic models are dumped in JSON mode,
    so cached reads return plain dicts/lists.
    """

    def __init__(self, repo: KVStoreRepository, ttl_seconds: Optional[int] = None):
        """
        Initialize Service

        Args:
            repo: Key-value store repository
            ttl_seconds: Default entry lifetime, defaults to CACHE_TTL_SECONDS
        """
        self.repo = repo
        self.ttl_seconds = (
            ttl_seconds if ttl_seconds is not None else get_settings().CACHE_TTL_SECONDS
        )

    async def get_cached(self, key: str) -> Optional[Any]:
        """
        Get a cached value

        Returns:
            Optional[Any]: Decoded value, None on miss
        """
        entry = await self.repo.get(key)
        if entry is None:
            logger.debug("Cache miss: %s", key)
            return None
        logger.debug("Cache hit: %s", key)
        return json.loads(entry.value)

    async def set_cached(
        self, key: str, value: Any, ttl_seconds: Optional[int] = None
    ) -> None:
        """
        Store a value

        Args:
            key: Cache key
            value: Any JSON-serializable value (pydantic models allowed)
            ttl_seconds: Lifetime override
        """
        ttl = ttl_seconds if ttl_seconds is not None else self.ttl_seconds
        await self.repo.set(key, json.dumps(to_jsonable(value)), ttl_seconds=ttl)

    async def del_cache(self, key: str) -> int:
        """
        Delete a key, or every key matching it when it contains ``*``

        Returns:
            int: Number of deleted entries
        """
        if "*" in key:
            deleted = await self.repo.delete_pattern(key)
        else:
            deleted = 1 if await self.repo.delete(key) else 0
        logger.debug("Cache invalidated: %s (%d entries)", key, deleted)
        return deleted
