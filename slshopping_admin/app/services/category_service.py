"""Business logic for product categories."""

from slshopping_admin.app.schemas.category import Category

from .base import EntityService


class CategoryService(EntityService[Category]):
    resource = "Category"
    key_field = "name"
    key_lookup = "find_by_name"
