"""
Activity Log Repository Interface

Defines the data access interface for the audit trail.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from crud_backend.domain.activity_log import (
    ActivityLogCreate,
    ActivityLogModel,
    ActivityLogQuery,
)


class ActivityLogRepository(ABC):
    """Activity Log Repository Interface"""

    @abstractmethod
    async def create(self, data: ActivityLogCreate) -> ActivityLogModel:
        """
        Create Activity Log

        Args:
            data: Log creation data

        Returns:
            ActivityLogModel: Created log model
        """
        pass

    @abstractmethod
    async def get_by_id(self, id: int) -> ActivityLogModel | None:
        """
        Get Log by ID

        Args:
            id: Log ID

        Returns:
            ActivityLogModel | None: Log model or None
        """
        pass

    @abstractmethod
    async def query(self, query: ActivityLogQuery) -> Tuple[List[ActivityLogModel], int]:
        """
        Query Logs

        Args:
            query: Query conditions

        Returns:
            Tuple[List[ActivityLogModel], int]: (Log list, Total count)
        """
        pass

    @abstractmethod
    async def cleanup_old_logs(self, days_to_keep: int) -> int:
        """
        Clean up old logs

        Args:
            days_to_keep: Number of days to keep logs

        Returns:
            int: Number of deleted logs
        """
        pass
