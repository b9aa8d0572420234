"""
Test Activity Log Repository
"""

import pytest
from datetime import datetime, timedelta, timezone

from crud_backend.domain.activity_log import ActivityLogCreate, ActivityLogQuery
from crud_backend.repositories.sqlalchemy.activity_log_repo import (
    SQLAlchemyActivityLogRepository,
)


def _log(action="create", document_id="doc-1", collection_name="products", **kwargs):
    return ActivityLogCreate(
        action=action,
        document_id=document_id,
        collection_name=collection_name,
        user_id=kwargs.pop("user_id", "u1"),
        username=kwargs.pop("username", "alice"),
        changes=kwargs.pop("changes", {"name": "Widget"}),
        created_at=kwargs.pop("created_at", datetime.now(timezone.utc)),
    )


@pytest.mark.asyncio
async def test_create_and_get(db_session):
    repo = SQLAlchemyActivityLogRepository(db_session)

    created = await repo.create(_log(changes={"name": "Widget", "price": 9.5}))
    fetched = await repo.get_by_id(created.id)

    assert fetched is not None
    assert fetched.action == "create"
    assert fetched.changes == {"name": "Widget", "price": 9.5}
    assert fetched.created_at.tzinfo is not None
    assert await repo.get_by_id(created.id + 100) is None


@pytest.mark.asyncio
async def test_query_filters_and_newest_first(db_session):
    repo = SQLAlchemyActivityLogRepository(db_session)
    base = datetime.now(timezone.utc)
    await repo.create(_log(action="create", created_at=base - timedelta(minutes=2)))
    await repo.create(_log(action="update", created_at=base - timedelta(minutes=1)))
    await repo.create(_log(action="update", collection_name="employees", created_at=base))

    items, total = await repo.query(ActivityLogQuery(collection_name="products"))
    assert total == 2
    assert [item.action for item in items] == ["update", "create"]

    items, total = await repo.query(ActivityLogQuery(action="update"))
    assert total == 2

    items, total = await repo.query(
        ActivityLogQuery(start_time=base - timedelta(seconds=90))
    )
    assert total == 2


@pytest.mark.asyncio
async def test_query_pagination(db_session):
    repo = SQLAlchemyActivityLogRepository(db_session)
    for i in range(5):
        await repo.create(_log(document_id=f"doc-{i}"))

    items, total = await repo.query(ActivityLogQuery(page=2, page_size=2))

    assert total == 5
    assert len(items) == 2


@pytest.mark.asyncio
async def test_cleanup_old_logs(db_session):
    """Test deleting logs older than specified days"""
    repo = SQLAlchemyActivityLogRepository(db_session)
    old_time = datetime.now(timezone.utc) - timedelta(days=10)
    recent_time = datetime.now(timezone.utc) - timedelta(days=3)
    for _ in range(3):
        await repo.create(_log(created_at=old_time))
    for _ in range(2):
        await repo.create(_log(created_at=recent_time))

    deleted = await repo.cleanup_old_logs(7)

    assert deleted == 3
    _, total = await repo.query(ActivityLogQuery())
    assert total == 2
