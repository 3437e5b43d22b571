"""Business logic for products.

Image checks are not part of this service; the products router combines
it with ``ProductImageService``.
"""

from slshopping_admin.app.schemas.product import Product

from .base import EntityService


class ProductService(EntityService[Product]):
    resource = "Product"
    key_field = "name"
    key_lookup = "find_by_name"
