"""Storage for brands."""

from slshopping_admin.app.schemas.brand import Brand

from .base import NamedEntityRepository


class BrandRepository(NamedEntityRepository[Brand]):
    table = "brands"
    model = Brand
