"""
Pydantic models for the catalog entities.

Each model doubles as the form-binding schema for its screens: every
field has a default, so calling the model without arguments gives the
blank instance shown on a "new" form, while field constraints are
checked when submitted form data is validated.
"""

from .brand import Brand
from .category import Category
from .product import Product
from .user import Role, User

__all__ = ["Brand", "Category", "Product", "Role", "User"]
