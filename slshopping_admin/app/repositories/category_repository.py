"""Storage for product categories."""

from slshopping_admin.app.schemas.category import Category

from .base import NamedEntityRepository


class CategoryRepository(NamedEntityRepository[Category]):
    table = "categories"
    model = Category
