"""
Product Service Module
"""

from typing import Any, Optional

from crud_backend.domain.base import CurrentUser
from crud_backend.domain.product import Product
from crud_backend.services.base_service import BaseService


class ProductService(BaseService[Product]):
    """Product CRUD service; SKUs are stored upper-case"""

    COLLECTION_NAME = "products"
    SEARCH_FIELDS = ("name", "sku", "category", "description")

    @staticmethod
    def _normalize(data: dict[str, Any]) -> dict[str, Any]:
        if isinstance(data.get("sku"), str):
            data["sku"] = data["sku"].strip().upper()
        return data

    async def before_create(
        self, data: dict[str, Any], user: Optional[CurrentUser]
    ) -> dict[str, Any]:
        return self._normalize(data)

    async def before_update(
        self, id: str, data: dict[str, Any], user: Optional[CurrentUser]
    ) -> dict[str, Any]:
        return self._normalize(data)
