"""
FastAPI dependency providers for the services.

Services are built per request on top of fresh repositories.  Tests
swap them out through ``app.dependency_overrides``.
"""

from slshopping_admin.app.repositories import (
    BrandRepository,
    CategoryRepository,
    ProductRepository,
    RoleRepository,
    UserRepository,
)
from slshopping_admin.app.services import (
    BrandService,
    CategoryService,
    ProductImageService,
    ProductService,
    UserService,
)


def get_category_service() -> CategoryService:
    return CategoryService(CategoryRepository())


def get_brand_service() -> BrandService:
    return BrandService(BrandRepository())


def get_product_service() -> ProductService:
    return ProductService(ProductRepository())


def get_product_image_service() -> ProductImageService:
    return ProductImageService()


def get_user_service() -> UserService:
    return UserService(UserRepository(), RoleRepository())
