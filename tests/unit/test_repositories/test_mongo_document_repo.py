"""
Test MongoDB Document Repository
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import ReturnDocument, TEXT

from crud_backend.domain.product import Product
from crud_backend.repositories.mongo.document_repo import MongoDocumentRepository

OID = ObjectId("65f1c2a9e4b0a1b2c3d4e5f6")


def _doc(**overrides):
    doc = {"_id": OID, "name": "Widget", "sku": "W-1", "price": 2.5, "quantity": 3}
    doc.update(overrides)
    return doc


@pytest.fixture
def collection():
    return MagicMock()


@pytest.fixture
def repo(collection):
    database = MagicMock()
    database.get_collection.return_value = collection
    return MongoDocumentRepository(database, Product, "products", ("name", "sku"))


@pytest.mark.asyncio
async def test_insert_stamps_timestamps_and_maps_id(repo, collection):
    collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=OID))

    entity = await repo.insert({"id": "ignored", "name": "Widget", "sku": "W-1"})

    written = collection.insert_one.call_args.args[0]
    assert "id" not in written
    assert written["created_at"] == written["updated_at"]
    assert entity.id == str(OID)
    assert entity.name == "Widget"


@pytest.mark.asyncio
async def test_find_by_id(repo, collection):
    collection.find_one = AsyncMock(return_value=_doc())

    entity = await repo.find_by_id(str(OID))

    collection.find_one.assert_awaited_once_with({"_id": OID})
    assert isinstance(entity, Product)
    assert entity.id == str(OID)


@pytest.mark.asyncio
async def test_find_by_id_missing(repo, collection):
    collection.find_one = AsyncMock(return_value=None)
    assert await repo.find_by_id(str(OID)) is None


@pytest.mark.asyncio
async def test_find_by_id_and_update_returns_updated(repo, collection):
    collection.find_one_and_update = AsyncMock(return_value=_doc(price=5.0))

    entity = await repo.find_by_id_and_update(str(OID), {"price": 5.0})

    args, kwargs = collection.find_one_and_update.call_args
    assert args[0] == {"_id": OID}
    assert args[1]["$set"]["price"] == 5.0
    assert "updated_at" in args[1]["$set"]
    assert kwargs["return_document"] == ReturnDocument.AFTER
    assert entity.price == 5.0


@pytest.mark.asyncio
async def test_find_by_id_and_delete(repo, collection):
    collection.find_one_and_delete = AsyncMock(return_value=None)
    assert await repo.find_by_id_and_delete(str(OID)) is None


@pytest.mark.asyncio
async def test_count_translates_id(repo, collection):
    collection.count_documents = AsyncMock(return_value=1)

    assert await repo.count({"id": str(OID)}) == 1
    collection.count_documents.assert_awaited_once_with({"_id": OID})


@pytest.mark.asyncio
async def test_find_applies_cursor_options(repo, collection):
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=[_doc()])
    collection.find.return_value = cursor

    items = await repo.find(
        {"is_deleted": {"$ne": True}}, skip=10, limit=5, sort={"name": 1, "price": -1}
    )

    collection.find.assert_called_once_with({"is_deleted": {"$ne": True}})
    cursor.sort.assert_called_once_with([("name", 1), ("price", -1)])
    cursor.skip.assert_called_once_with(10)
    cursor.limit.assert_called_once_with(5)
    assert [item.id for item in items] == [str(OID)]


@pytest.mark.asyncio
async def test_ensure_indexes_creates_text_index(repo, collection):
    collection.create_index = AsyncMock()

    await repo.ensure_indexes()

    collection.create_index.assert_awaited_once_with(
        [("name", TEXT), ("sku", TEXT)], name="products_text"
    )


def test_model_name(repo):
    assert repo.model_name == "Product"
    assert repo.collection_name == "products"
