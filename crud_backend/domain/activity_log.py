"""
Activity Log Domain Model

Defines audit trail related Data Transfer Objects (DTOs).
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from crud_backend.common.time import ensure_utc


class ActivityAction:
    """Action names written to the audit trail"""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    SOFT_DELETE = "softDelete"
    VIEW = "view"
    VIEW_ALL = "viewAll"
    SEARCH = "search"


class ActivityLogCreate(BaseModel):
    """Create Activity Log Model"""

    # Action name, see ActivityAction
    action: str = Field(..., max_length=50, description="Action")
    # Affected document ID (empty for list/search actions)
    document_id: str = Field("", max_length=64, description="Document ID")
    # Collection the document belongs to
    collection_name: str = Field(..., max_length=100, description="Collection Name")
    user_id: Optional[str] = Field(None, description="User ID")
    username: Optional[str] = Field(None, description="User Name")
    # Submitted data, removed document or query condition
    changes: Optional[Any] = Field(None, description="Changes")
    created_at: datetime = Field(..., description="Creation Time")

    @field_validator("created_at", mode="after")
    @classmethod
    def _created_at_utc(cls, v: datetime) -> datetime:
        dt = ensure_utc(v)
        assert dt is not None
        return dt


class ActivityLogModel(ActivityLogCreate):
    """Activity Log Complete Model"""

    id: int = Field(..., description="Log ID")

    model_config = ConfigDict(from_attributes=True)


class ActivityLogQuery(BaseModel):
    """Activity Log Query Conditions"""

    collection_name: Optional[str] = None
    document_id: Optional[str] = None
    user_id: Optional[str] = None
    action: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    page: int = Field(1, ge=1)
    page_size: int = Field(20, ge=1, le=1000)
