"""
Pydantic model for products.

A product references one category and one brand by id.  The
``category_name`` and ``brand_name`` fields are filled in by the
repository when it reads a product back, for display only; they are
ignored when a product is written.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Product(BaseModel):
    id: Optional[int] = None
    name: str = Field("", min_length=1, max_length=256, description="Unique product name")
    description: Optional[str] = Field(None, max_length=4096)
    in_stock: int = Field(0, ge=0, description="Units in stock")
    price: float = Field(0.0, ge=0, description="List price")
    cost: float = Field(0.0, ge=0, description="Purchase cost")
    discount_price: float = Field(0.0, ge=0, description="Price while discounted")
    shipping_fee: float = Field(0.0, ge=0)
    image_path: Optional[str] = Field(None, description="Path of the stored product image")
    category_id: Optional[int] = None
    brand_id: Optional[int] = None

    category_name: Optional[str] = None
    brand_name: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }
