"""
Cache Store Repository Interface

Key-value storage with optional TTL behind ``CacheService``. Values are
opaque strings (the cache service stores JSON).
"""

from abc import ABC, abstractmethod
from typing import Optional

from crud_backend.domain.kv_store import KeyValueModel


class KVStoreRepository(ABC):
    """Cache Store Repository Interface"""

    @abstractmethod
    async def get(self, key: str) -> Optional[KeyValueModel]:
        """Return the live entry for a key, None if missing or expired"""
        pass

    @abstractmethod
    async def set(
        self, key: str, value: str, ttl_seconds: Optional[int] = None
    ) -> KeyValueModel:
        """
        Create or replace an entry

        Args:
            key: Cache key
            value: Serialized value
            ttl_seconds: Lifetime in seconds; None or 0 keeps the entry until deleted
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete a key, returning whether it existed"""
        pass

    @abstractmethod
    async def delete_pattern(self, pattern: str) -> int:
        """
        Delete all keys matching a glob pattern (``*`` wildcard)

        Args:
            pattern: Key pattern, e.g. ``products-findAll-*``

        Returns:
            int: Number of deleted keys
        """
        pass

    @abstractmethod
    async def cleanup_expired(self) -> int:
        """Purge expired entries, returning how many were removed"""
        pass
