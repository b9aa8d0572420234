"""
Product API

Provides CRUD endpoints for Products.
"""

from crud_backend.api.crud import create_crud_router
from crud_backend.api.deps import get_product_service
from crud_backend.domain.product import Product, ProductCreate, ProductUpdate

router = create_crud_router(
    prefix="/products",
    tags=["Products"],
    service_dependency=get_product_service,
    entity_model=Product,
    create_model=ProductCreate,
    update_model=ProductUpdate,
)
