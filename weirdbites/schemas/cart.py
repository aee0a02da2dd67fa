from pydantic import BaseModel, Field
from decimal import Decimal
from datetime import datetime
from typing import List


class CartLine(BaseModel):
    """One product held in the cart. Serialized with camelCase keys."""
    product_id: str = Field(alias="productId")
    quantity: int
    added_at: datetime = Field(alias="addedAt")

    class Config:
        populate_by_name = True


class CartSnapshot(BaseModel):
    """Stored form of a cart: its lines plus the moment it stops being valid."""
    items: List[CartLine]
    expires_at: datetime = Field(alias="expiresAt")

    class Config:
        populate_by_name = True


class CartItemAdd(BaseModel):
    product_id: str


class CartItemUpdate(BaseModel):
    product_id: str
    quantity: int


class CartItemResponse(BaseModel):
    product_id: str
    name: str
    price: Decimal
    image_url: str
    stock: int
    quantity: int
    subtotal: Decimal


class CartResponse(BaseModel):
    lines: List[CartLine]
    items: List[CartItemResponse]
    total_quantity: int
    subtotal: Decimal
