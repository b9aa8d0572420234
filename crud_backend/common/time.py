"""
Time Utilities

SQL columns (activity logs, cache entries) hold naive UTC timestamps.
Everything else (domain models, API, MongoDB documents) uses aware UTC.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

UTC = timezone.utc


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_naive() -> datetime:
    """Current UTC time without tzinfo, for SQL columns."""
    return utc_now().replace(tzinfo=None)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Treat naive values as UTC; convert aware values to UTC."""
    if dt is None:
        return None
    return dt.replace(tzinfo=UTC) if dt.tzinfo is None else dt.astimezone(UTC)


def to_utc_naive(dt: Optional[datetime]) -> Optional[datetime]:
    """Normalize to UTC and drop tzinfo, for SQL storage and filters."""
    aware = ensure_utc(dt)
    return aware.replace(tzinfo=None) if aware is not None else None


def days_ago_naive(days: int) -> datetime:
    """Naive UTC cutoff ``days`` before now, for retention queries."""
    return utc_now_naive() - timedelta(days=days)
