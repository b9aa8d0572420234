"""
Product Domain Model

Defines Product related Data Transfer Objects (DTOs).
"""

from typing import Optional

from pydantic import BaseModel, Field

from crud_backend.domain.base import BaseEntity


class ProductBase(BaseModel):
    """Product Base Model"""

    # Product Name
    name: str = Field(..., min_length=1, max_length=200, description="Product Name")
    # Stock Keeping Unit
    sku: str = Field(..., min_length=1, max_length=64, description="SKU")
    # Unit Price
    price: float = Field(0, ge=0, description="Unit Price")
    # Quantity In Stock
    quantity: int = Field(0, ge=0, description="Quantity In Stock")
    # Category
    category: Optional[str] = Field(None, max_length=100, description="Category")
    # Description
    description: Optional[str] = Field(None, max_length=2000, description="Description")
    # Is Active
    is_active: bool = Field(True, description="Is Active")


class ProductCreate(ProductBase):
    """Create Product Request Model"""
    pass


class ProductUpdate(BaseModel):
    """Update Product Request Model (All fields optional)"""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    sku: Optional[str] = Field(None, min_length=1, max_length=64)
    price: Optional[float] = Field(None, ge=0)
    quantity: Optional[int] = Field(None, ge=0)
    category: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = Field(None, max_length=2000)
    is_active: Optional[bool] = None


class Product(ProductBase, BaseEntity):
    """Product Complete Model"""
    pass
