"""
Test Configuration Module
"""

import pytest
import pytest_asyncio
from typing import Any, AsyncGenerator, Optional, Sequence

from bson import ObjectId
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from crud_backend.common.events import EventEmitter
from crud_backend.common.time import utc_now
from crud_backend.db.models import Base
from crud_backend.domain.base import EntityT
from crud_backend.domain.employee import Employee
from crud_backend.domain.product import Product
from crud_backend.repositories.document_repo import DocumentRepository
from crud_backend.repositories.sqlalchemy import (
    SQLAlchemyActivityLogRepository,
    SQLAlchemyKVStoreRepository,
)
from crud_backend.services.activity_log_service import ActivityLogService
from crud_backend.services.cache_service import CacheService
from crud_backend.services.employee_service import EmployeeService
from crud_backend.services.product_service import ProductService


# Use in-memory database for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class InMemoryDocumentRepository(DocumentRepository[EntityT]):
    """
    Document repository kept in a dict

    Understands plain equality, ``$ne`` and ``$text`` (case-insensitive
    substring match of any term over the search fields).
    """

    def __init__(
        self,
        model: type[EntityT],
        collection_name: str,
        search_fields: Sequence[str] = (),
    ):
        super().__init__(model, collection_name)
        self.search_fields = tuple(search_fields)
        self.documents: dict[str, dict[str, Any]] = {}

    def _matches(self, doc: dict[str, Any], filter: dict[str, Any]) -> bool:
        for key, cond in filter.items():
            if key == "$text":
                terms = cond["$search"].lower().split()
                haystack = " ".join(
                    str(doc.get(field) or "") for field in self.search_fields
                ).lower()
                if not any(term in haystack for term in terms):
                    return False
            elif isinstance(cond, dict) and "$ne" in cond:
                if doc.get(key) == cond["$ne"]:
                    return False
            elif doc.get(key) != cond:
                return False
        return True

    def _entity(self, doc: dict[str, Any]) -> EntityT:
        return self.model.model_validate(doc)

    async def insert(self, data: dict[str, Any]) -> EntityT:
        now = utc_now()
        doc = {k: v for k, v in data.items() if k != "id"}
        doc.update(id=str(ObjectId()), created_at=now, updated_at=now)
        self.documents[doc["id"]] = doc
        return self._entity(doc)

    async def find_by_id(self, id: str) -> Optional[EntityT]:
        doc = self.documents.get(id)
        return self._entity(doc) if doc else None

    async def find_by_id_and_update(
        self, id: str, data: dict[str, Any]
    ) -> Optional[EntityT]:
        doc = self.documents.get(id)
        if doc is None:
            return None
        doc.update({k: v for k, v in data.items() if k != "id"})
        doc["updated_at"] = utc_now()
        return self._entity(doc)

    async def find_by_id_and_delete(self, id: str) -> Optional[EntityT]:
        doc = self.documents.pop(id, None)
        return self._entity(doc) if doc else None

    async def count(self, filter: dict[str, Any]) -> int:
        return sum(1 for doc in self.documents.values() if self._matches(doc, filter))

    async def find(
        self,
        filter: dict[str, Any],
        skip: int = 0,
        limit: int = 0,
        sort: Optional[dict[str, int]] = None,
    ) -> list[EntityT]:
        docs = [doc for doc in self.documents.values() if self._matches(doc, filter)]
        for field, direction in reversed(list((sort or {}).items())):
            docs.sort(key=lambda d: (d.get(field) is None, d.get(field)), reverse=direction < 0)
        docs = docs[skip:]
        if limit:
            docs = docs[:limit]
        return [self._entity(doc) for doc in docs]


@pytest_asyncio.fixture
async def async_engine():
    """Create async database engine for testing"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Clean up
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for testing"""
    async_session = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def product_repo() -> InMemoryDocumentRepository[Product]:
    return InMemoryDocumentRepository(
        Product, ProductService.COLLECTION_NAME, ProductService.SEARCH_FIELDS
    )


@pytest.fixture
def employee_repo() -> InMemoryDocumentRepository[Employee]:
    return InMemoryDocumentRepository(
        Employee, EmployeeService.COLLECTION_NAME, EmployeeService.SEARCH_FIELDS
    )


@pytest.fixture
def event_emitter() -> EventEmitter:
    return EventEmitter()


@pytest.fixture
def cache_service(db_session) -> CacheService:
    return CacheService(SQLAlchemyKVStoreRepository(db_session), ttl_seconds=300)


@pytest.fixture
def activity_log_service(db_session) -> ActivityLogService:
    return ActivityLogService(SQLAlchemyActivityLogRepository(db_session))


@pytest.fixture
def product_service(
    product_repo, cache_service, activity_log_service, event_emitter
) -> ProductService:
    return ProductService(product_repo, cache_service, activity_log_service, event_emitter)


@pytest.fixture
def employee_service(
    employee_repo, cache_service, activity_log_service, event_emitter
) -> EmployeeService:
    return EmployeeService(employee_repo, cache_service, activity_log_service, event_emitter)
