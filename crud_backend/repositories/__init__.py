"""
Data Access Layer Module Initialization
"""

from crud_backend.repositories.document_repo import DocumentRepository
from crud_backend.repositories.activity_log_repo import ActivityLogRepository
from crud_backend.repositories.kv_store_repo import KVStoreRepository

__all__ = [
    "DocumentRepository",
    "ActivityLogRepository",
    "KVStoreRepository",
]
