"""
Scheduled Task Module

APScheduler jobs for activity log retention and purging expired rows of
the database cache store.
"""

import logging
from typing import Awaitable, Callable, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger
from apscheduler.triggers.interval import IntervalTrigger
from sqlalchemy.ext.asyncio import AsyncSession

from crud_backend.config import get_settings
from crud_backend.db.session import get_db
from crud_backend.repositories.sqlalchemy import (
    SQLAlchemyActivityLogRepository,
    SQLAlchemyKVStoreRepository,
)
from crud_backend.services.activity_log_service import ActivityLogService

logger = logging.getLogger(__name__)

_scheduler: Optional[AsyncIOScheduler] = None


async def _run_with_session(
    name: str, work: Callable[[AsyncSession], Awaitable[int]]
) -> None:
    """Run one task in its own session; failures are logged, never raised"""
    logger.info("Starting scheduled task: %s", name)
    try:
        async for db in get_db():
            deleted = await work(db)
            logger.info("Scheduled task %s completed: %d rows deleted", name, deleted)
            break
    except Exception as e:
        logger.error("%s task failed: %s", name, e, exc_info=True)


async def cleanup_activity_logs_task():
    """Delete activity logs older than ACTIVITY_LOG_RETENTION_DAYS"""
    retention_days = get_settings().ACTIVITY_LOG_RETENTION_DAYS

    async def work(db: AsyncSession) -> int:
        service = ActivityLogService(SQLAlchemyActivityLogRepository(db))
        return await service.cleanup_old_logs(retention_days)

    await _run_with_session("Activity log cleanup", work)


async def cleanup_expired_cache_task():
    """Delete expired rows of the database cache store"""

    async def work(db: AsyncSession) -> int:
        return await SQLAlchemyKVStoreRepository(db).cleanup_expired()

    await _run_with_session("Cache cleanup", work)


def start_scheduler():
    """
    Start the scheduler with all jobs

    The cache cleanup job is only registered for the database cache
    store; Redis expires keys natively.
    """
    global _scheduler

    if _scheduler is not None:
        logger.warning("Scheduler already started")
        return

    settings = get_settings()
    _scheduler = AsyncIOScheduler()
    _scheduler.add_job(
        cleanup_activity_logs_task,
        trigger=IntervalTrigger(hours=settings.ACTIVITY_LOG_CLEANUP_INTERVAL_HOURS),
        id="cleanup_activity_logs",
        name="Clean up old activity logs",
        replace_existing=True,
    )
    if settings.CACHE_STORE_TYPE == "database":
        _scheduler.add_job(
            cleanup_expired_cache_task,
            trigger=CronTrigger(hour=1, minute=0),
            id="cleanup_expired_cache",
            name="Clean up expired cache entries",
            replace_existing=True,
        )
    _scheduler.start()

    logger.info(
        "Scheduler started with jobs: %s",
        ", ".join(job.id for job in _scheduler.get_jobs()),
    )


def shutdown_scheduler():
    """Stop the scheduler, waiting for running jobs"""
    global _scheduler

    if _scheduler is None:
        return

    _scheduler.shutdown(wait=True)
    _scheduler = None
    logger.info("Scheduler shutdown completed")


def get_scheduler() -> Optional[AsyncIOScheduler]:
    return _scheduler
