"""
API Dependency Injection Module

Provides the dependencies required by FastAPI routes.
"""

from typing import Annotated, Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from crud_backend.common.events import EventEmitter, get_event_emitter
from crud_backend.config import get_settings
from crud_backend.db.mongo import get_mongo_database
from crud_backend.db.redis import get_redis
from crud_backend.db.session import get_db as _get_db
from crud_backend.domain.base import CurrentUser
from crud_backend.domain.employee import Employee
from crud_backend.domain.product import Product
from crud_backend.repositories.document_repo import DocumentRepository
from crud_backend.repositories.kv_store_repo import KVStoreRepository
from crud_backend.repositories.mongo import MongoDocumentRepository
from crud_backend.repositories.redis import RedisKVStoreRepository
from crud_backend.repositories.sqlalchemy import (
    SQLAlchemyActivityLogRepository,
    SQLAlchemyKVStoreRepository,
)
from crud_backend.services import (
    ActivityLogService,
    CacheService,
    EmployeeService,
    ProductService,
)


async def get_db():
    """
    Get database session dependency

    Yields:
        AsyncSession: Async database session
    """
    async for session in _get_db():
        yield session


# Database session dependency type
DbSession = Annotated[AsyncSession, Depends(get_db)]


# ============ Infrastructure dependencies ============

def get_kv_store_repo(db: DbSession) -> KVStoreRepository:
    """Get the cache store selected by CACHE_STORE_TYPE"""
    settings = get_settings()
    if settings.CACHE_STORE_TYPE == "redis":
        return RedisKVStoreRepository(get_redis(), settings.CACHE_KEY_PREFIX)
    return SQLAlchemyKVStoreRepository(db)


def get_cache_service(
    repo: Annotated[KVStoreRepository, Depends(get_kv_store_repo)],
) -> CacheService:
    """Get cache service"""
    return CacheService(repo)


def get_activity_log_service(db: DbSession) -> ActivityLogService:
    """Get activity log service"""
    return ActivityLogService(SQLAlchemyActivityLogRepository(db))


def get_emitter() -> EventEmitter:
    """Get the process-wide event emitter"""
    return get_event_emitter()


CacheServiceDep = Annotated[CacheService, Depends(get_cache_service)]
ActivityLogServiceDep = Annotated[ActivityLogService, Depends(get_activity_log_service)]
EventEmitterDep = Annotated[EventEmitter, Depends(get_emitter)]


# ============ Repository dependencies ============

def get_product_repo() -> DocumentRepository[Product]:
    """Get product document repository"""
    return MongoDocumentRepository(
        get_mongo_database(),
        Product,
        ProductService.COLLECTION_NAME,
        ProductService.SEARCH_FIELDS,
    )


def get_employee_repo() -> DocumentRepository[Employee]:
    """Get employee document repository"""
    return MongoDocumentRepository(
        get_mongo_database(),
        Employee,
        EmployeeService.COLLECTION_NAME,
        EmployeeService.SEARCH_FIELDS,
    )


# ============ Service dependencies ============

def get_product_service(
    repo: Annotated[DocumentRepository[Product], Depends(get_product_repo)],
    cache_service: CacheServiceDep,
    activity_log_service: ActivityLogServiceDep,
    event_emitter: EventEmitterDep,
) -> ProductService:
    """Get product service"""
    return ProductService(repo, cache_service, activity_log_service, event_emitter)


def get_employee_service(
    repo: Annotated[DocumentRepository[Employee], Depends(get_employee_repo)],
    cache_service: CacheServiceDep,
    activity_log_service: ActivityLogServiceDep,
    event_emitter: EventEmitterDep,
) -> EmployeeService:
    """Get employee service"""
    return EmployeeService(repo, cache_service, activity_log_service, event_emitter)


# ============ Current user ============

async def get_current_user(
    x_user_id: Optional[str] = Header(None, description="Acting user ID", alias="x-user-id"),
    x_username: Optional[str] = Header(None, description="Acting user name", alias="x-username"),
) -> Optional[CurrentUser]:
    """
    Get the acting user

    Identity is taken from request headers as-is; authentication is
    handled upstream by an API gateway or reverse proxy.
    """
    if not x_user_id and not x_username:
        return None
    return CurrentUser(user_id=x_user_id, username=x_username)


# Dependency type aliases
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
EmployeeServiceDep = Annotated[EmployeeService, Depends(get_employee_service)]
CurrentUserDep = Annotated[Optional[CurrentUser], Depends(get_current_user)]
