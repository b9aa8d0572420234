"""
Generic CRUD Router

Builds the standard list/search/get/create/update/delete endpoints for an
entity service, so per-entity routers stay one call long.
"""

from typing import Any, Callable, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from crud_backend.api.deps import CurrentUserDep
from crud_backend.common.utils import parse_filter, parse_sort
from crud_backend.config import get_settings
from crud_backend.domain.base import BaseEntity, PaginatedResult
from crud_backend.services.base_service import BaseService


def create_crud_router(
    *,
    prefix: str,
    tags: list[str],
    service_dependency: Callable[..., BaseService[Any]],
    entity_model: type[BaseEntity],
    create_model: type[BaseModel],
    update_model: type[BaseModel],
) -> APIRouter:
    """
    Create a CRUD router for one entity

    Args:
        prefix: Route prefix, e.g. ``/products``
        tags: OpenAPI tags
        service_dependency: FastAPI dependency returning the entity service
        entity_model: Response model of a single entity
        create_model: Request body model for creation
        update_model: Request body model for updates (all fields optional)

    Returns:
        APIRouter: Router with the generated endpoints
    """
    settings = get_settings()
    router = APIRouter(prefix=prefix, tags=tags)
    page_model = PaginatedResult[entity_model]
    service_param = Depends(service_dependency)

    @router.get("", response_model=page_model)
    async def list_entities(
        user: CurrentUserDep,
        service: BaseService[Any] = service_param,
        page: int = Query(1, ge=1, description="Page number"),
        limit: int = Query(
            settings.DEFAULT_PAGE_SIZE,
            ge=1,
            le=settings.MAX_PAGE_SIZE,
            description="Items per page",
        ),
        sort: Optional[str] = Query(None, description="Sort fields, e.g. name,-price"),
        filter: Optional[str] = Query(
            None, description='JSON object of field conditions, e.g. {"category": "tools"}'
        ),
    ):
        """
        Get entity list

        Supports pagination, sorting and field filters.
        """
        return await service.find_all(
            parse_filter(filter), page, limit, parse_sort(sort), user
        )

    @router.get("/search", response_model=page_model)
    async def search_entities(
        user: CurrentUserDep,
        service: BaseService[Any] = service_param,
        q: str = Query(..., min_length=1, description="Search text"),
        page: int = Query(1, ge=1, description="Page number"),
        limit: int = Query(
            settings.DEFAULT_PAGE_SIZE,
            ge=1,
            le=settings.MAX_PAGE_SIZE,
            description="Items per page",
        ),
    ):
        """
        Full-text search
        """
        return await service.search(q, page, limit, user)

    @router.get("/{id}", response_model=entity_model)
    async def get_entity(
        id: str,
        user: CurrentUserDep,
        service: BaseService[Any] = service_param,
    ):
        """
        Get single entity
        """
        return await service.find_one(id, user)

    @router.post("", response_model=entity_model, status_code=status.HTTP_201_CREATED)
    async def create_entity(
        data: create_model,  # type: ignore[valid-type]
        user: CurrentUserDep,
        service: BaseService[Any] = service_param,
    ):
        """
        Create entity
        """
        return await service.create(data.model_dump(), user)

    @router.put("/{id}", response_model=entity_model)
    async def update_entity(
        id: str,
        data: update_model,  # type: ignore[valid-type]
        user: CurrentUserDep,
        service: BaseService[Any] = service_param,
    ):
        """
        Update entity

        Only fields present in the request body are changed.
        """
        return await service.update(id, data.model_dump(exclude_unset=True), user)

    @router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_entity(
        id: str,
        user: CurrentUserDep,
        service: BaseService[Any] = service_param,
    ):
        """
        Delete entity permanently
        """
        await service.remove(id, user)

    @router.delete("/{id}/soft", status_code=status.HTTP_204_NO_CONTENT)
    async def soft_delete_entity(
        id: str,
        user: CurrentUserDep,
        service: BaseService[Any] = service_param,
    ):
        """
        Soft delete entity (flag only, document kept)
        """
        await service.soft_remove(id, user)

    return router
