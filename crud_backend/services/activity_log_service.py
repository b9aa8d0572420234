"""
Activity Log Service Module

Provides business logic for the audit trail of entity operations.
"""

import logging
from typing import Any, Optional

from crud_backend.common.errors import NotFoundError
from crud_backend.common.time import utc_now
from crud_backend.common.utils import to_jsonable
from crud_backend.domain.activity_log import (
    ActivityLogCreate,
    ActivityLogModel,
    ActivityLogQuery,
)
from crud_backend.domain.base import CurrentUser
from crud_backend.repositories.activity_log_repo import ActivityLogRepository

logger = logging.getLogger(__name__)


class ActivityLogService:
    """
    Activity Log Service

    Handles writing and querying audit records.
    """

    def __init__(self, repo: ActivityLogRepository):
        """
        Initialize Service

        Args:
            repo: Activity Log Repository
        """
        self.repo = repo

    async def log_activity(
        self,
        action: str,
        document_id: str,
        collection_name: str,
        user: Optional[CurrentUser],
        changes: Any = None,
    ) -> ActivityLogModel:
        """
        Record an operation

        Args:
            action: Action name, see ActivityAction
            document_id: Affected document ID ("" for list/search)
            collection_name: Collection the document belongs to
            user: Acting user, may be None
            changes: Submitted data, removed entity or query condition

        Returns:
            ActivityLogModel: Stored record
        """
        data = ActivityLogCreate(
            action=action,
            document_id=document_id or "",
            collection_name=collection_name,
            user_id=user.user_id if user else None,
            username=user.username if user else None,
            changes=to_jsonable(changes) if changes is not None else None,
            created_at=utc_now(),
        )
        return await self.repo.create(data)

    async def get_by_id(self, id: int) -> ActivityLogModel:
        """
        Get Log by ID

        Raises:
            NotFoundError: Log not found
        """
        log = await self.repo.get_by_id(id)
        if not log:
            raise NotFoundError(
                message=f"Activity log with id {id} not found",
                code="activity_log_not_found",
            )
        return log

    async def query(
        self, query: ActivityLogQuery
    ) -> tuple[list[ActivityLogModel], int]:
        """
        Query Log List

        Returns:
            tuple[list[ActivityLogModel], int]: (Log list, Total count)
        """
        return await self.repo.query(query)

    async def cleanup_old_logs(self, retention_days: int) -> int:
        """
        Clean up logs older than specified days

        Args:
            retention_days: Number of days to keep logs

        Returns:
            int: Number of deleted logs
        """
        deleted_count = await self.repo.cleanup_old_logs(retention_days)
        logger.info(
            "Activity log cleanup: %d logs older than %d days deleted",
            deleted_count,
            retention_days,
        )
        return deleted_count
