"""
Document Repository Interface

Defines the generic data access interface over one document collection,
decoupling services from the concrete document store.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional

from crud_backend.domain.base import EntityT


class DocumentRepository(ABC, Generic[EntityT]):
    """
    Document Repository Interface

    ``filter`` arguments use MongoDB query syntax. Identifiers are
    ObjectId hex strings and are validated by the caller.
    """

    def __init__(self, model: type[EntityT], collection_name: str):
        """
        Initialize Repository

        Args:
            model: Entity class documents are converted to
            collection_name: Name of the backing collection
        """
        self.model = model
        self.collection_name = collection_name

    @property
    def model_name(self) -> str:
        """Entity name used as the event namespace, e.g. ``Product``"""
        return self.model.__name__

    @abstractmethod
    async def insert(self, data: dict[str, Any]) -> EntityT:
        """
        Insert a new document

        Args:
            data: Document fields (without identifier)

        Returns:
            EntityT: Stored entity including generated id and timestamps
        """
        pass

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[EntityT]:
        """
        Find a document by ID

        Returns:
            Optional[EntityT]: Entity or None
        """
        pass

    @abstractmethod
    async def find_by_id_and_update(
        self, id: str, data: dict[str, Any]
    ) -> Optional[EntityT]:
        """
        Set the given fields on a document

        Returns:
            Optional[EntityT]: Updated entity (after the update), None if not found
        """
        pass

    @abstractmethod
    async def find_by_id_and_delete(self, id: str) -> Optional[EntityT]:
        """
        Physically delete a document

        Returns:
            Optional[EntityT]: Deleted entity, None if not found
        """
        pass

    @abstractmethod
    async def count(self, filter: dict[str, Any]) -> int:
        """Count documents matching a filter"""
        pass

    @abstractmethod
    async def find(
        self,
        filter: dict[str, Any],
        skip: int = 0,
        limit: int = 0,
        sort: Optional[dict[str, int]] = None,
    ) -> list[EntityT]:
        """
        Find documents matching a filter

        Args:
            filter: Query condition
            skip: Number of documents to skip
            limit: Maximum number of documents (0 means no limit)
            sort: Field name to direction (1 ascending, -1 descending)

        Returns:
            list[EntityT]: Matching entities
        """
        pass

    async def ensure_indexes(self) -> None:
        """Create indexes required by the repository (no-op by default)"""
        return None
