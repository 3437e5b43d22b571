"""Pydantic model for product categories."""

from typing import Optional

from pydantic import BaseModel, Field


class Category(BaseModel):
    id: Optional[int] = None
    name: str = Field("", min_length=1, max_length=128, description="Unique category name")

    model_config = {
        "from_attributes": True,
    }
