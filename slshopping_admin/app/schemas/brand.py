"""Pydantic model for brands."""

from typing import Optional

from pydantic import BaseModel, Field


class Brand(BaseModel):
    id: Optional[int] = None
    name: str = Field("", min_length=1, max_length=128, description="Unique brand name")

    model_config = {
        "from_attributes": True,
    }
