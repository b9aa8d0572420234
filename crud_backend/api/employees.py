"""
Employee API

Provides CRUD endpoints for Employees.
"""

from crud_backend.api.crud import create_crud_router
from crud_backend.api.deps import get_employee_service
from crud_backend.domain.employee import Employee, EmployeeCreate, EmployeeUpdate

router = create_crud_router(
    prefix="/employees",
    tags=["Employees"],
    service_dependency=get_employee_service,
    entity_model=Employee,
    create_model=EmployeeCreate,
    update_model=EmployeeUpdate,
)
