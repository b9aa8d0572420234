"""
API Router Module Initialization
"""

from crud_backend.api.activity_logs import router as activity_logs_router
from crud_backend.api.employees import router as employees_router
from crud_backend.api.products import router as products_router

__all__ = [
    "activity_logs_router",
    "employees_router",
    "products_router",
]
