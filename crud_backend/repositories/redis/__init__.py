"""
Redis Repository Implementation Module Initialization
"""

from crud_backend.repositories.redis.kv_store_repo import RedisKVStoreRepository

__all__ = [
    "RedisKVStoreRepository",
]
