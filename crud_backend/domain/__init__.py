"""
Domain Model Module Initialization
"""

from crud_backend.domain.base import (
    BaseEntity,
    CurrentUser,
    PaginatedResult,
)
from crud_backend.domain.product import (
    Product,
    ProductCreate,
    ProductUpdate,
)
from crud_backend.domain.employee import (
    Employee,
    EmployeeCreate,
    EmployeeUpdate,
)
from crud_backend.domain.activity_log import (
    ActivityAction,
    ActivityLogCreate,
    ActivityLogModel,
    ActivityLogQuery,
)
from crud_backend.domain.kv_store import KeyValueModel

__all__ = [
    # Base
    "BaseEntity",
    "CurrentUser",
    "PaginatedResult",
    # Product
    "Product",
    "ProductCreate",
    "ProductUpdate",
    # Employee
    "Employee",
    "EmployeeCreate",
    "EmployeeUpdate",
    # ActivityLog
    "ActivityAction",
    "ActivityLogCreate",
    "ActivityLogModel",
    "ActivityLogQuery",
    # KV Store
    "KeyValueModel",
]
