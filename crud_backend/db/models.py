"""
SQLAlchemy ORM Model Definitions

Defines the relational tables used alongside the document store:
- activity_logs: Audit trail of entity operations
- cache_entries: Database-backed cache store
"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.dialects.sqlite import JSON as SQLiteJSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from crud_backend.common.time import utc_now_naive


class Base(DeclarativeBase):
    """SQLAlchemy ORM Base Class"""
    pass


class ActivityLog(Base):
    """
    Activity Logs Table

    One row per audited service operation (create, update, view, ...).
    """

    __tablename__ = "activity_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Action name
    action: Mapped[str] = mapped_column(String(50), nullable=False)
    # Affected document ID, empty for list/search
    document_id: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    # Collection name
    collection_name: Mapped[str] = mapped_column(String(100), nullable=False)
    user_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    username: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    # Submitted data / removed document / query condition
    changes: Mapped[Optional[Any]] = mapped_column(SQLiteJSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utc_now_naive
    )

    __table_args__ = (
        Index("idx_activity_logs_created_at", "created_at"),
        Index("idx_activity_logs_collection_document", "collection_name", "document_id"),
        Index("idx_activity_logs_user_id", "user_id"),
    )


class CacheEntry(Base):
    """
    Cache Entries Table

    Key-value cache used when CACHE_STORE_TYPE is "database".
    """

    __tablename__ = "cache_entries"

    key: Mapped[str] = mapped_column(String(512), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    # NULL means never expires
    expires_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utc_now_naive
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utc_now_naive, onupdate=utc_now_naive
    )

    __table_args__ = (
        Index("idx_cache_entries_expires_at", "expires_at"),
    )
