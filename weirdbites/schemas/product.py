from pydantic import BaseModel
from decimal import Decimal
from typing import List
from datetime import datetime

from weirdbites.core.pagination import PaginationMeta


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str
    price: Decimal
    image_url: str
    category: str
    origin: str
    stock: int
    is_featured: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ProductListResponse(BaseModel):
    products: List[ProductResponse]
    pagination: PaginationMeta


class CartProductResponse(BaseModel):
    """Only the fields the cart needs for display."""
    id: str
    name: str
    price: Decimal
    image_url: str
    stock: int

    class Config:
        from_attributes = True


class BulkProductsResponse(BaseModel):
    products: List[CartProductResponse]


class CategoryResponse(BaseModel):
    name: str
    count: int
