"""
Service layer.

Each service wraps the repository of one entity family and implements
the shared catalog contract from ``base.EntityService``.  Routers depend
on services only, never on repositories.
"""

from .brand_service import BrandService
from .category_service import CategoryService
from .product_image_service import ProductImageService
from .product_service import ProductService
from .user_service import UserService

__all__ = [
    "BrandService",
    "CategoryService",
    "ProductImageService",
    "ProductService",
    "UserService",
]
