"""Business logic for brands."""

from slshopping_admin.app.schemas.brand import Brand

from .base import EntityService


class BrandService(EntityService[Brand]):
    resource = "Brand"
    key_field = "name"
    key_lookup = "find_by_name"
