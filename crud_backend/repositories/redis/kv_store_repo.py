"""
Cache Store Redis Implementation

Entries expire through Redis native TTL, so no cleanup job is needed.
All keys live under a configurable prefix, which keeps pattern
deletion away from other applications sharing the instance.
"""

import json
from typing import Optional

from redis.asyncio import Redis

from crud_backend.common.time import utc_now
from crud_backend.domain.kv_store import KeyValueModel
from crud_backend.repositories.kv_store_repo import KVStoreRepository


class RedisKVStoreRepository(KVStoreRepository):
    """
    Cache store on Redis

    Each key holds a JSON envelope ``{"value", "created_at", "updated_at"}``.
    """

    # Keys fetched per SCAN round trip
    SCAN_COUNT = 500

    def __init__(self, client: Redis, key_prefix: str = ""):
        """
        Initialize Repository

        Args:
            client: Async Redis client (decode_responses=True)
            key_prefix: Prepended to every key, e.g. ``crud_backend:``
        """
        self.client = client
        self.key_prefix = key_prefix

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    @staticmethod
    def _to_domain(key: str, envelope: dict) -> KeyValueModel:
        # Expiry is owned by Redis and not tracked in the envelope
        return KeyValueModel(
            key=key,
            value=envelope["value"],
            created_at=envelope["created_at"],
            updated_at=envelope["updated_at"],
        )

    async def get(self, key: str) -> Optional[KeyValueModel]:
        raw = await self.client.get(self._key(key))
        if raw is None:
            return None
        return self._to_domain(key, json.loads(raw))

    async def set(
        self, key: str, value: str, ttl_seconds: Optional[int] = None
    ) -> KeyValueModel:
        now = utc_now().isoformat()
        existing = await self.client.get(self._key(key))
        envelope = {
            "value": value,
            "created_at": json.loads(existing)["created_at"] if existing else now,
            "updated_at": now,
        }

        await self.client.set(
            self._key(key),
            json.dumps(envelope),
            ex=ttl_seconds if ttl_seconds and ttl_seconds > 0 else None,
        )
        return self._to_domain(key, envelope)

    async def delete(self, key: str) -> bool:
        return await self.client.delete(self._key(key)) > 0

    async def delete_pattern(self, pattern: str) -> int:
        """Delete matching keys, scanning instead of KEYS"""
        keys = [
            key
            async for key in self.client.scan_iter(
                match=self._key(pattern), count=self.SCAN_COUNT
            )
        ]
        if not keys:
            return 0
        return await self.client.delete(*keys)

    async def cleanup_expired(self) -> int:
        """Nothing to do: Redis evicts expired keys itself"""
        return 0
