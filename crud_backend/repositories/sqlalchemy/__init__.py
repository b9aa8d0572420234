"""
SQLAlchemy Repository Implementation Module Initialization
"""

from crud_backend.repositories.sqlalchemy.activity_log_repo import SQLAlchemyActivityLogRepository
from crud_backend.repositories.sqlalchemy.kv_store_repo import SQLAlchemyKVStoreRepository

__all__ = [
    "SQLAlchemyActivityLogRepository",
    "SQLAlchemyKVStoreRepository",
]
