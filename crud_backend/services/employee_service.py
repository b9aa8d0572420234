"""
Employee Service Module
"""

from typing import Any, Optional

from crud_backend.domain.base import CurrentUser
from crud_backend.domain.employee import Employee
from crud_backend.services.base_service import BaseService


class EmployeeService(BaseService[Employee]):
    """Employee CRUD service; emails are stored lower-case"""

    COLLECTION_NAME = "employees"
    SEARCH_FIELDS = ("first_name", "last_name", "email", "position", "department")

    @staticmethod
    def _normalize(data: dict[str, Any]) -> dict[str, Any]:
        if isinstance(data.get("email"), str):
            data["email"] = data["email"].strip().lower()
        return data

    async def before_create(
        self, data: dict[str, Any], user: Optional[CurrentUser]
    ) -> dict[str, Any]:
        return self._normalize(data)

    async def before_update(
        self, id: str, data: dict[str, Any], user: Optional[CurrentUser]
    ) -> dict[str, Any]:
        return self._normalize(data)
