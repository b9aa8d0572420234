"""
Base Domain Model

Defines the bookkeeping fields shared by every stored document, the
acting user, and the paginated result envelope.
"""

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class BaseEntity(BaseModel):
    """
    Base Entity Model

    Documents are opaque records: unknown fields are kept as-is. The
    audit fields are filled in by services by convention only.
    """

    # Document ID (ObjectId hex string)
    id: str = Field(..., description="Document ID")
    # User who created the document
    created_by: Optional[str] = Field(None, description="Created By")
    # User who last updated the document
    updated_by: Optional[str] = Field(None, description="Updated By")
    # Soft delete flag
    is_deleted: bool = Field(False, description="Is Deleted")
    # User who soft-deleted the document
    deleted_by: Optional[str] = Field(None, description="Deleted By")
    # Soft delete time
    deleted_at: Optional[datetime] = Field(None, description="Deleted At")
    created_at: Optional[datetime] = Field(None, description="Creation Time")
    updated_at: Optional[datetime] = Field(None, description="Update Time")

    model_config = ConfigDict(extra="allow", from_attributes=True)


EntityT = TypeVar("EntityT", bound=BaseEntity)


class CurrentUser(BaseModel):
    """Acting user attached to every service call"""

    user_id: Optional[str] = Field(None, description="User ID")
    username: Optional[str] = Field(None, description="User Name")


class PaginatedResult(BaseModel, Generic[EntityT]):
    """Paginated Query Result"""

    data: list[EntityT]
    total: int
    page: int
    limit: int
