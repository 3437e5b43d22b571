"""
SQLite-backed repositories.

Repositories are the storage collaborators of the services: they run
the SQL and convert rows to pydantic models, and hold no business
rules.  Every call opens its own connection and closes it before
returning.
"""

from .brand_repository import BrandRepository
from .category_repository import CategoryRepository
from .product_repository import ProductRepository
from .role_repository import RoleRepository
from .user_repository import UserRepository

__all__ = [
    "BrandRepository",
    "CategoryRepository",
    "ProductRepository",
    "RoleRepository",
    "UserRepository",
]
