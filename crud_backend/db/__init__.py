"""
Database Module Initialization
"""

from crud_backend.db.session import get_db, init_db, close_db, AsyncSessionLocal
from crud_backend.db.models import (
    Base,
    ActivityLog,
    CacheEntry,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
    "Base",
    "ActivityLog",
    "CacheEntry",
]
