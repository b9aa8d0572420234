"""
Employee Domain Model

Defines Employee related Data Transfer Objects (DTOs).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from crud_backend.domain.base import BaseEntity

# Loose address check; mailbox verification is out of scope
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class EmployeeBase(BaseModel):
    """Employee Base Model"""

    first_name: str = Field(..., min_length=1, max_length=100, description="First Name")
    last_name: str = Field(..., min_length=1, max_length=100, description="Last Name")
    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=254, description="Email")
    phone: Optional[str] = Field(None, max_length=32, description="Phone")
    # Job Title
    position: Optional[str] = Field(None, max_length=100, description="Position")
    department: Optional[str] = Field(None, max_length=100, description="Department")
    hired_at: Optional[datetime] = Field(None, description="Hire Date")
    is_active: bool = Field(True, description="Is Active")


class EmployeeCreate(EmployeeBase):
    """Create Employee Request Model"""
    pass


class EmployeeUpdate(BaseModel):
    """Update Employee Request Model (All fields optional)"""

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN, max_length=254)
    phone: Optional[str] = Field(None, max_length=32)
    position: Optional[str] = Field(None, max_length=100)
    department: Optional[str] = Field(None, max_length=100)
    hired_at: Optional[datetime] = None
    is_active: Optional[bool] = None


class Employee(EmployeeBase, BaseEntity):
    """Employee Complete Model"""
    pass
