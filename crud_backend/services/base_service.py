"""
Base Service Module

Generic CRUD service shared by every entity service. Each operation
chains the document repository, the cache, the activity log and the
event emitter, with overridable lifecycle hooks.
"""

import logging
from contextlib import contextmanager
from typing import Any, Generic, Iterator, Optional

from crud_backend.common.errors import (
    AppError,
    BadRequestError,
    InternalServerError,
    NotFoundError,
)
from crud_backend.common.events import EventEmitter
from crud_backend.common.time import utc_now
from crud_backend.common.utils import is_valid_object_id, stable_json
from crud_backend.domain.activity_log import ActivityAction
from crud_backend.domain.base import CurrentUser, EntityT, PaginatedResult
from crud_backend.repositories.document_repo import DocumentRepository
from crud_backend.services.activity_log_service import ActivityLogService
from crud_backend.services.cache_service import CacheService

logger = logging.getLogger(__name__)

# MongoDB skip is a signed 64-bit integer
MAX_SKIP = 2**63 - 1


class BaseService(Generic[EntityT]):
    """
    Base CRUD Service

    Subclasses bind an entity type and override hooks as needed. Invalid
    identifiers raise BadRequestError, missing documents raise
    NotFoundError; every other failure is logged and surfaced as
    InternalServerError. Activity logging is best-effort.

    Cache keys:
        ``<collection>-findOne-<id>``
        ``<collection>-findAll-<condition>-<page>-<limit>-<sort>``
    """

    # Hide soft-deleted documents from find_all / find_one / search
    exclude_soft_deleted: bool = True

    def __init__(
        self,
        repo: DocumentRepository[EntityT],
        cache_service: CacheService,
        activity_log_service: ActivityLogService,
        event_emitter: EventEmitter,
    ):
        """
        Initialize Service

        Args:
            repo: Document repository of the entity
            cache_service: Query cache
            activity_log_service: Audit trail writer
            event_emitter: Lifecycle event emitter

        Raises:
            InternalServerError: Repository missing
        """
        if repo is None:
            raise InternalServerError("Repository not injected properly in BaseService")
        self.repo = repo
        self.cache_service = cache_service
        self.activity_log_service = activity_log_service
        self.event_emitter = event_emitter

    @property
    def collection_name(self) -> str:
        return self.repo.collection_name

    @property
    def model_name(self) -> str:
        return self.repo.model_name

    # ============ Lifecycle hooks ============

    async def before_create(
        self, data: dict[str, Any], user: Optional[CurrentUser]
    ) -> dict[str, Any]:
        return data

    async def after_create(self, entity: EntityT, user: Optional[CurrentUser]) -> None:
        pass

    async def before_update(
        self, id: str, data: dict[str, Any], user: Optional[CurrentUser]
    ) -> dict[str, Any]:
        return data

    async def after_update(self, entity: EntityT, user: Optional[CurrentUser]) -> None:
        pass

    async def before_remove(self, entity: EntityT, user: Optional[CurrentUser]) -> None:
        pass

    async def after_remove(self, entity: EntityT, user: Optional[CurrentUser]) -> None:
        pass

    async def on_view(
        self, data: list[EntityT], user: Optional[CurrentUser]
    ) -> list[EntityT]:
        """Post-process entities before they are returned (and cached by find_all)"""
        return data

    async def on_finding(
        self, condition: dict[str, Any], user: Optional[CurrentUser]
    ) -> dict[str, Any]:
        """Adjust the query condition of find_all / search"""
        return condition

    # ============ Helpers ============

    @contextmanager
    def _operation_errors(self, message: str) -> Iterator[None]:
        """Let AppError through, turn anything else into InternalServerError"""
        try:
            yield
        except AppError:
            raise
        except Exception as e:
            logger.exception("%s [%s]", message, self.collection_name)
            raise InternalServerError(message) from e

    def _validate_id(self, id: str) -> None:
        if not is_valid_object_id(id):
            raise BadRequestError(message="Invalid ID format", code="invalid_id")

    @staticmethod
    def _validate_pagination(page: int, limit: int) -> None:
        if page < 1 or limit < 1:
            raise BadRequestError(
                message="page and limit must be positive integers",
                code="invalid_pagination",
            )
        if (page - 1) * limit > MAX_SKIP:
            raise BadRequestError(
                message="page is out of range",
                code="invalid_pagination",
            )

    def _not_found(self, id: str) -> NotFoundError:
        return NotFoundError(
            message=f"Entity with id {id} not found",
            code=f"{self.model_name.lower()}_not_found",
        )

    def _find_one_key(self, id: str) -> str:
        return f"{self.collection_name}-findOne-{id}"

    def _find_all_pattern(self) -> str:
        return f"{self.collection_name}-findAll-*"

    async def _invalidate(self, id: Optional[str] = None) -> None:
        if id is not None:
            await self.cache_service.del_cache(self._find_one_key(id))
        await self.cache_service.del_cache(self._find_all_pattern())

    async def _emit(self, suffix: str, entity: EntityT, user: Optional[CurrentUser]) -> None:
        await self.event_emitter.emit(
            f"{self.model_name}.{suffix}",
            {"entity": entity, "user": user},
        )

    async def _build_condition(
        self, filter: dict[str, Any], user: Optional[CurrentUser]
    ) -> dict[str, Any]:
        condition = dict(filter)
        if self.exclude_soft_deleted and "is_deleted" not in condition:
            condition["is_deleted"] = {"$ne": True}
        return await self.on_finding(condition, user)

    async def _find_paginated(
        self,
        condition: dict[str, Any],
        page: int,
        limit: int,
        sort: dict[str, int],
        user: Optional[CurrentUser],
    ) -> PaginatedResult[EntityT]:
        result_type = PaginatedResult[self.repo.model]
        cache_key = (
            f"{self.collection_name}-findAll-{stable_json(condition)}"
            f"-{page}-{limit}-{stable_json(list(sort.items()))}"
        )
        cached = await self.cache_service.get_cached(cache_key)
        if cached is not None:
            return result_type.model_validate(cached)

        total = await self.repo.count(condition)
        items = await self.repo.find(
            condition, skip=(page - 1) * limit, limit=limit, sort=sort
        )
        items = await self.on_view(items, user)

        result = result_type(data=items, total=total, page=page, limit=limit)
        await self.cache_service.set_cached(cache_key, result)
        return result

    # ============ Operations ============

    async def create(
        self, data: dict[str, Any], user: Optional[CurrentUser] = None
    ) -> EntityT:
        """
        Create an entity

        Stamps ``created_by``, runs the create hooks, invalidates list
        caches and emits ``<Model>.saved``.
        """
        data = dict(data)
        with self._operation_errors("Error creating entity"):
            if user and user.user_id:
                data["created_by"] = user.user_id

            processed = await self.before_create(data, user)
            entity = await self.repo.insert(processed)

            await self.after_create(entity, user)
            await self.log_activity(ActivityAction.CREATE, entity.id, user, data)
            await self._invalidate()
            await self._emit("saved", entity, user)
            return entity

    async def update(
        self, id: str, data: dict[str, Any], user: Optional[CurrentUser] = None
    ) -> EntityT:
        """
        Update an entity

        Raises:
            BadRequestError: Invalid ID format
            NotFoundError: Entity not found
        """
        self._validate_id(id)
        data = dict(data)
        with self._operation_errors("Error updating entity"):
            if user and user.user_id:
                data["updated_by"] = user.user_id

            processed = await self.before_update(id, data, user)
            entity = await self.repo.find_by_id_and_update(id, processed)
            if entity is None:
                raise self._not_found(id)

            await self.after_update(entity, user)
            await self.log_activity(ActivityAction.UPDATE, id, user, data)
            await self._invalidate(id)
            await self._emit("saved", entity, user)
            return entity

    async def remove(self, id: str, user: Optional[CurrentUser] = None) -> None:
        """
        Physically delete an entity

        Raises:
            BadRequestError: Invalid ID format
            NotFoundError: Entity not found
        """
        self._validate_id(id)
        with self._operation_errors("Error removing entity"):
            entity = await self.repo.find_by_id(id)
            if entity is None:
                raise self._not_found(id)
            await self.before_remove(entity, user)

            removed = await self.repo.find_by_id_and_delete(id)
            if removed is None:
                raise self._not_found(id)

            await self.after_remove(entity, user)
            await self.log_activity(ActivityAction.DELETE, id, user, entity)
            await self._invalidate(id)
            await self._emit("deleted", entity, user)

    async def soft_remove(self, id: str, user: Optional[CurrentUser] = None) -> None:
        """
        Flag an entity as deleted, keeping the document

        Raises:
            BadRequestError: Invalid ID format
            NotFoundError: Entity not found
        """
        self._validate_id(id)
        with self._operation_errors("Error soft-deleting entity"):
            entity = await self.repo.find_by_id_and_update(
                id,
                {
                    "is_deleted": True,
                    "deleted_by": user.user_id if user else None,
                    "deleted_at": utc_now(),
                },
            )
            if entity is None:
                raise self._not_found(id)

            await self.log_activity(ActivityAction.SOFT_DELETE, id, user)
            await self._invalidate(id)
            await self._emit("softDeleted", entity, user)

    async def find_all(
        self,
        filter: Optional[dict[str, Any]] = None,
        page: int = 1,
        limit: int = 10,
        sort: Optional[dict[str, int]] = None,
        user: Optional[CurrentUser] = None,
    ) -> PaginatedResult[EntityT]:
        """
        List entities page by page

        Args:
            filter: Query condition
            page: 1-based page number
            limit: Page size
            sort: Field name to direction (1 / -1)
            user: Acting user

        Returns:
            PaginatedResult[EntityT]: Page of entities with the total count
        """
        self._validate_pagination(page, limit)
        with self._operation_errors("Error fetching entities"):
            condition = await self._build_condition(filter or {}, user)
            result = await self._find_paginated(condition, page, limit, sort or {}, user)
            await self.log_activity(ActivityAction.VIEW_ALL, "", user, condition)
            return result

    async def find_one(self, id: str, user: Optional[CurrentUser] = None) -> EntityT:
        """
        Get an entity by ID

        Raises:
            BadRequestError: Invalid ID format
            NotFoundError: Entity not found (or soft-deleted)
        """
        self._validate_id(id)
        with self._operation_errors("Error fetching entity"):
            cache_key = self._find_one_key(id)
            cached = await self.cache_service.get_cached(cache_key)
            if cached is not None:
                entity = self.repo.model.model_validate(cached)
            else:
                entity = await self.repo.find_by_id(id)
                if entity is None or (self.exclude_soft_deleted and entity.is_deleted):
                    raise self._not_found(id)
                await self.cache_service.set_cached(cache_key, entity)
                await self.log_activity(ActivityAction.VIEW, id, user)

            viewed = await self.on_view([entity], user)
            return viewed[0] if viewed else entity

    async def search(
        self,
        query: str,
        page: int = 1,
        limit: int = 10,
        user: Optional[CurrentUser] = None,
    ) -> PaginatedResult[EntityT]:
        """
        Full-text search over the collection's text index

        Raises:
            BadRequestError: Blank query or invalid pagination
        """
        if not query or not query.strip():
            raise BadRequestError(
                message="Search query must not be empty",
                code="empty_query",
            )
        self._validate_pagination(page, limit)
        with self._operation_errors("Error searching entities"):
            condition = await self._build_condition(
                {"$text": {"$search": query.strip()}}, user
            )
            result = await self._find_paginated(condition, page, limit, {}, user)
            await self.log_activity(ActivityAction.SEARCH, "", user, {"query": query})
            return result

    async def log_activity(
        self,
        action: str,
        document_id: str,
        user: Optional[CurrentUser],
        changes: Any = None,
    ) -> None:
        """Write an audit record; failures are logged and never propagated"""
        try:
            await self.activity_log_service.log_activity(
                action,
                document_id,
                self.collection_name,
                user,
                changes,
            )
        except Exception:
            logger.exception(
                "Failed to write activity log: %s %s/%s",
                action,
                self.collection_name,
                document_id,
            )
