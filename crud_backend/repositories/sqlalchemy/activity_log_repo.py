"""
Activity Log Repository SQLAlchemy Implementation

Provides concrete database operation implementation for the audit trail.
"""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from crud_backend.common.time import days_ago_naive, ensure_utc, to_utc_naive
from crud_backend.db.models import ActivityLog as ActivityLogORM
from crud_backend.domain.activity_log import (
    ActivityLogCreate,
    ActivityLogModel,
    ActivityLogQuery,
)
from crud_backend.repositories.activity_log_repo import ActivityLogRepository


class SQLAlchemyActivityLogRepository(ActivityLogRepository):
    """
    Activity Log Repository SQLAlchemy Implementation

    Uses SQLAlchemy ORM to implement database operations for activity logs.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Repository

        Args:
            session: Async database session
        """
        self.session = session

    def _to_domain(self, entity: ActivityLogORM) -> ActivityLogModel:
        """Convert ORM entity to domain model"""
        return ActivityLogModel(
            id=entity.id,
            action=entity.action,
            document_id=entity.document_id,
            collection_name=entity.collection_name,
            user_id=entity.user_id,
            username=entity.username,
            changes=entity.changes,
            created_at=ensure_utc(entity.created_at),
        )

    async def create(self, data: ActivityLogCreate) -> ActivityLogModel:
        """Create activity log"""
        entity = ActivityLogORM(
            action=data.action,
            document_id=data.document_id,
            collection_name=data.collection_name,
            user_id=data.user_id,
            username=data.username,
            changes=data.changes,
            created_at=to_utc_naive(data.created_at),
        )
        self.session.add(entity)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(entity)
        return self._to_domain(entity)

    async def get_by_id(self, id: int) -> ActivityLogModel | None:
        """Get log by ID"""
        result = await self.session.execute(
            select(ActivityLogORM).where(ActivityLogORM.id == id)
        )
        entity = result.scalar_one_or_none()
        return self._to_domain(entity) if entity else None

    async def query(
        self, query: ActivityLogQuery
    ) -> tuple[list[ActivityLogModel], int]:
        """
        Query log list

        Supports multi-condition filtering, pagination, newest first.
        """
        conditions = []

        if query.collection_name:
            conditions.append(ActivityLogORM.collection_name == query.collection_name)
        if query.document_id:
            conditions.append(ActivityLogORM.document_id == query.document_id)
        if query.user_id:
            conditions.append(ActivityLogORM.user_id == query.user_id)
        if query.action:
            conditions.append(ActivityLogORM.action == query.action)

        # Time range filter
        if query.start_time:
            conditions.append(
                ActivityLogORM.created_at >= to_utc_naive(query.start_time)
            )
        if query.end_time:
            conditions.append(
                ActivityLogORM.created_at <= to_utc_naive(query.end_time)
            )

        stmt = select(ActivityLogORM)
        count_stmt = select(func.count()).select_from(ActivityLogORM)
        if conditions:
            stmt = stmt.where(*conditions)
            count_stmt = count_stmt.where(*conditions)

        total_result = await self.session.execute(count_stmt)
        total = total_result.scalar() or 0

        stmt = (
            stmt.order_by(ActivityLogORM.created_at.desc(), ActivityLogORM.id.desc())
            .offset((query.page - 1) * query.page_size)
            .limit(query.page_size)
        )
        result = await self.session.execute(stmt)
        items = [self._to_domain(entity) for entity in result.scalars().all()]

        return items, total

    async def cleanup_old_logs(self, days_to_keep: int) -> int:
        """
        Delete logs older than specified days

        Args:
            days_to_keep: Number of days to keep logs

        Returns:
            int: Number of deleted logs
        """
        cutoff_time = days_ago_naive(days_to_keep)

        result = await self.session.execute(
            delete(ActivityLogORM).where(ActivityLogORM.created_at < cutoff_time)
        )
        await self.session.commit()
        return result.rowcount
