"""
Activity Log API

Provides audit trail query and cleanup endpoints.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel

from crud_backend.api.deps import ActivityLogServiceDep
from crud_backend.config import get_settings
from crud_backend.domain.activity_log import ActivityLogModel, ActivityLogQuery

router = APIRouter(
    prefix="/activity-logs",
    tags=["Activity Logs"],
)


class PaginatedActivityLogResponse(BaseModel):
    """Activity Log Pagination Response"""
    items: list[ActivityLogModel]
    total: int
    page: int
    page_size: int


class CleanupResponse(BaseModel):
    """Activity Log Cleanup Response"""
    deleted_count: int
    message: str


@router.get("", response_model=PaginatedActivityLogResponse)
async def list_activity_logs(
    service: ActivityLogServiceDep,
    collection_name: Optional[str] = Query(None, description="Collection Name"),
    document_id: Optional[str] = Query(None, description="Document ID"),
    user_id: Optional[str] = Query(None, description="User ID"),
    action: Optional[str] = Query(None, description="Action"),
    start_time: Optional[datetime] = Query(None, description="Start Time"),
    end_time: Optional[datetime] = Query(None, description="End Time"),
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(20, ge=1, le=1000, description="Items per page"),
):
    """
    Get Activity Log List

    Newest first. Supports pagination and filtering.
    """
    query = ActivityLogQuery(
        collection_name=collection_name,
        document_id=document_id,
        user_id=user_id,
        action=action,
        start_time=start_time,
        end_time=end_time,
        page=page,
        page_size=page_size,
    )
    items, total = await service.query(query)
    return PaginatedActivityLogResponse(
        items=items,
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/{log_id}", response_model=ActivityLogModel)
async def get_activity_log(
    log_id: int,
    service: ActivityLogServiceDep,
):
    """
    Get single Activity Log
    """
    return await service.get_by_id(log_id)


@router.post("/cleanup", response_model=CleanupResponse)
async def cleanup_activity_logs(
    service: ActivityLogServiceDep,
    retention_days: Optional[int] = Query(
        None, ge=1, description="Days to keep (defaults to ACTIVITY_LOG_RETENTION_DAYS)"
    ),
):
    """
    Delete activity logs older than the retention period
    """
    days = retention_days or get_settings().ACTIVITY_LOG_RETENTION_DAYS
    deleted_count = await service.cleanup_old_logs(days)
    return CleanupResponse(
        deleted_count=deleted_count,
        message=f"Deleted {deleted_count} activity logs older than {days} days",
    )
