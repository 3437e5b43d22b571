"""
Top-level router of the console.

Aggregates the per-family routers under their list route prefix.  When
a new entity family is added, include its router here.
"""

from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

from .endpoints import brands, categories, products, users

router = APIRouter()

router.include_router(categories.router, prefix="/categories", tags=["categories"])
router.include_router(brands.router, prefix="/brands", tags=["brands"])
router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(users.router, prefix="/users", tags=["users"])


@router.get("/", include_in_schema=False)
async def index() -> RedirectResponse:
    return RedirectResponse("/products", status_code=status.HTTP_302_FOUND)
