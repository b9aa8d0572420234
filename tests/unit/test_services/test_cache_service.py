"""
Test Cache Service
"""

from datetime import datetime, timezone

import pytest

from crud_backend.domain.product import Product
from crud_backend.repositories.sqlalchemy.kv_store_repo import SQLAlchemyKVStoreRepository
from crud_backend.services.cache_service import CacheService


@pytest.mark.asyncio
async def test_get_missing(cache_service):
    assert await cache_service.get_cached("nope") is None


@pytest.mark.asyncio
async def test_round_trip_plain_values(cache_service):
    await cache_service.set_cached("k", {"a": [1, 2], "b": None})
    assert await cache_service.get_cached("k") == {"a": [1, 2], "b": None}


@pytest.mark.asyncio
async def test_falsy_values_are_hits(cache_service):
    await cache_service.set_cached("empty", [])
    await cache_service.set_cached("zero", 0)

    assert await cache_service.get_cached("empty") == []
    assert await cache_service.get_cached("zero") == 0


@pytest.mark.asyncio
async def test_models_are_stored_as_json(cache_service):
    product = Product(
        id="65f1c2a9e4b0a1b2c3d4e5f6",
        name="Widget",
        sku="W-1",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )

    await cache_service.set_cached("products-findOne-65f1c2a9e4b0a1b2c3d4e5f6", product)
    cached = await cache_service.get_cached("products-findOne-65f1c2a9e4b0a1b2c3d4e5f6")

    assert cached["created_at"] == "2024-01-01T00:00:00Z"
    assert Product.model_validate(cached) == product


@pytest.mark.asyncio
async def test_del_cache_single_key(cache_service):
    await cache_service.set_cached("k", 1)

    assert await cache_service.del_cache("k") == 1
    assert await cache_service.del_cache("k") == 0
    assert await cache_service.get_cached("k") is None


@pytest.mark.asyncio
async def test_del_cache_pattern(cache_service):
    await cache_service.set_cached("products-findAll-a", 1)
    await cache_service.set_cached("products-findAll-b", 2)
    await cache_service.set_cached("products-findOne-x", 3)

    assert await cache_service.del_cache("products-findAll-*") == 2
    assert await cache_service.get_cached("products-findOne-x") == 3


@pytest.mark.asyncio
async def test_ttl_defaults_to_settings(db_session):
    service = CacheService(SQLAlchemyKVStoreRepository(db_session))
    assert service.ttl_seconds == 300

    await service.set_cached("k", 1)
    entry = await service.repo.get("k")
    assert entry.expires_at is not None


@pytest.mark.asyncio
async def test_ttl_override(cache_service):
    await cache_service.set_cached("forever", 1, ttl_seconds=0)
    entry = await cache_service.repo.get("forever")
    assert entry.expires_at is None
