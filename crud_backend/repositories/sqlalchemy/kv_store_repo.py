"""
Cache Store SQLAlchemy Implementation

Keeps cache entries in the ``cache_entries`` table. Expiry is checked on
read; the scheduler purges the remaining expired rows.
"""

from datetime import timedelta
from typing import Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from crud_backend.common.time import ensure_utc, utc_now_naive
from crud_backend.db.models import CacheEntry
from crud_backend.domain.kv_store import KeyValueModel
from crud_backend.repositories.kv_store_repo import KVStoreRepository


def glob_to_like(pattern: str) -> str:
    """Translate a ``*`` glob into a LIKE pattern escaped with backslash"""
    escaped = (
        pattern.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )
    return escaped.replace("*", "%")


def glob_to_sqlite_glob(pattern: str) -> str:
    """Keep ``*`` as the only wildcard of a SQLite GLOB pattern"""
    return pattern.replace("[", "[[]").replace("?", "[?]")


def _is_expired(entry: CacheEntry) -> bool:
    return entry.expires_at is not None and entry.expires_at <= utc_now_naive()


class SQLAlchemyKVStoreRepository(KVStoreRepository):
    """Cache store on the SQL database, one row per key"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _to_domain(entry: CacheEntry) -> KeyValueModel:
        return KeyValueModel(
            key=entry.key,
            value=entry.value,
            expires_at=ensure_utc(entry.expires_at),
            created_at=ensure_utc(entry.created_at),
            updated_at=ensure_utc(entry.updated_at),
        )

    async def _execute_delete(self, *conditions) -> int:
        result = await self.session.execute(delete(CacheEntry).where(*conditions))
        await self.session.commit()
        return result.rowcount

    async def get(self, key: str) -> Optional[KeyValueModel]:
        entry = await self.session.get(CacheEntry, key)
        if entry is None:
            return None
        if _is_expired(entry):
            await self.session.delete(entry)
            await self.session.commit()
            return None
        return self._to_domain(entry)

    async def set(
        self, key: str, value: str, ttl_seconds: Optional[int] = None
    ) -> KeyValueModel:
        expires_at = (
            utc_now_naive() + timedelta(seconds=ttl_seconds)
            if ttl_seconds and ttl_seconds > 0
            else None
        )

        entry = await self.session.get(CacheEntry, key)
        if entry is None:
            entry = CacheEntry(key=key, value=value, expires_at=expires_at)
            self.session.add(entry)
        else:
            entry.value = value
            entry.expires_at = expires_at

        await self.session.commit()
        await self.session.refresh(entry)
        return self._to_domain(entry)

    async def delete(self, key: str) -> bool:
        return await self._execute_delete(CacheEntry.key == key) > 0

    async def delete_pattern(self, pattern: str) -> int:
        # SQLite LIKE ignores ASCII case, GLOB does not
        if self.session.bind.dialect.name == "sqlite":
            condition = CacheEntry.key.op("GLOB")(glob_to_sqlite_glob(pattern))
        else:
            condition = CacheEntry.key.like(glob_to_like(pattern), escape="\\")
        return await self._execute_delete(condition)

    async def cleanup_expired(self) -> int:
        return await self._execute_delete(
            CacheEntry.expires_at.isnot(None),
            CacheEntry.expires_at <= utc_now_naive(),
        )
