"""
Service Layer Module Initialization
"""

from crud_backend.services.base_service import BaseService
from crud_backend.services.cache_service import CacheService
from crud_backend.services.activity_log_service import ActivityLogService
from crud_backend.services.product_service import ProductService
from crud_backend.services.employee_service import EmployeeService

__all__ = [
    "BaseService",
    "CacheService",
    "ActivityLogService",
    "ProductService",
    "EmployeeService",
]
