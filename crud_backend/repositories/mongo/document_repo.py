"""
Document Repository MongoDB Implementation

Provides concrete document store operations using the pymongo async API.
"""

import logging
from typing import Any, Optional, Sequence

from bson import ObjectId
from pymongo import ReturnDocument, TEXT
from pymongo.asynchronous.database import AsyncDatabase

from crud_backend.common.time import utc_now
from crud_backend.domain.base import EntityT
from crud_backend.repositories.document_repo import DocumentRepository

logger = logging.getLogger(__name__)


class MongoDocumentRepository(DocumentRepository[EntityT]):
    """
    Document Repository MongoDB Implementation

    Maps the MongoDB ``_id`` to the entity ``id`` field and stamps
    ``created_at`` / ``updated_at`` on writes.
    """

    def __init__(
        self,
        database: AsyncDatabase,
        model: type[EntityT],
        collection_name: str,
        search_fields: Sequence[str] = (),
    ):
        """
        Initialize Repository

        Args:
            database: Async MongoDB database
            model: Entity class
            collection_name: Collection name
            search_fields: Fields covered by the text index used by ``$text`` search
        """
        super().__init__(model, collection_name)
        self.collection = database.get_collection(collection_name)
        self.search_fields = tuple(search_fields)

    def _to_entity(self, doc: dict[str, Any]) -> EntityT:
        """Convert MongoDB document to entity"""
        data = dict(doc)
        data["id"] = str(data.pop("_id"))
        return self.model.model_validate(data)

    def _to_document(self, data: dict[str, Any]) -> dict[str, Any]:
        """Strip identifier fields, which are never written through ``$set``"""
        return {k: v for k, v in data.items() if k not in ("id", "_id")}

    @staticmethod
    def _prepare_filter(filter: dict[str, Any]) -> dict[str, Any]:
        """Translate ``id`` conditions to ``_id`` with ObjectId values"""
        prepared = dict(filter)
        if "id" in prepared:
            prepared["_id"] = prepared.pop("id")
        if isinstance(prepared.get("_id"), str) and ObjectId.is_valid(prepared["_id"]):
            prepared["_id"] = ObjectId(prepared["_id"])
        return prepared

    async def insert(self, data: dict[str, Any]) -> EntityT:
        """Insert a new document"""
        now = utc_now()
        doc = self._to_document(data)
        doc["created_at"] = now
        doc["updated_at"] = now

        result = await self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return self._to_entity(doc)

    async def find_by_id(self, id: str) -> Optional[EntityT]:
        """Find a document by ID"""
        doc = await self.collection.find_one({"_id": ObjectId(id)})
        if not doc:
            return None
        return self._to_entity(doc)

    async def find_by_id_and_update(
        self, id: str, data: dict[str, Any]
    ) -> Optional[EntityT]:
        """Set fields on a document, returning the updated version"""
        changes = self._to_document(data)
        changes["updated_at"] = utc_now()

        doc = await self.collection.find_one_and_update(
            {"_id": ObjectId(id)},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        if not doc:
            return None
        return self._to_entity(doc)

    async def find_by_id_and_delete(self, id: str) -> Optional[EntityT]:
        """Delete a document, returning what was removed"""
        doc = await self.collection.find_one_and_delete({"_id": ObjectId(id)})
        if not doc:
            return None
        return self._to_entity(doc)

    async def count(self, filter: dict[str, Any]) -> int:
        """Count documents matching a filter"""
        return await self.collection.count_documents(self._prepare_filter(filter))

    async def find(
        self,
        filter: dict[str, Any],
        skip: int = 0,
        limit: int = 0,
        sort: Optional[dict[str, int]] = None,
    ) -> list[EntityT]:
        """Find documents matching a filter"""
        cursor = self.collection.find(self._prepare_filter(filter))
        if sort:
            cursor = cursor.sort(list(sort.items()))
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)

        docs = await cursor.to_list(length=None)
        return [self._to_entity(doc) for doc in docs]

    async def ensure_indexes(self) -> None:
        """Create the text index over the declared search fields"""
        if not self.search_fields:
            return
        await self.collection.create_index(
            [(field, TEXT) for field in self.search_fields],
            name=f"{self.collection_name}_text",
        )
        logger.info(
            "Text index ensured on %s(%s)",
            self.collection_name,
            ", ".join(self.search_fields),
        )
