"""
Generic catalog service.

Every domain service of the console follows the same contract over its
repository: keyword search or full listing, a uniqueness check on the
entity's natural key, an existence-checked fetch, and passthrough save
and delete.  ``EntityService`` implements that contract once; concrete
services only say which field is the natural key and which repository
method looks it up.
"""

import logging
from typing import Generic, List, Optional, Protocol, TypeVar

from slshopping_admin.app.core.errors import NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Repository(Protocol[T]):
    """Storage operations a service needs.

    The natural-key lookup (``find_by_name`` or ``find_by_email``) is
    resolved by name through ``EntityService.key_lookup``.
    """

    def find_all(self) -> List[T]: ...

    def search(self, keyword: str) -> List[T]: ...

    def find_by_id(self, entity_id: int) -> Optional[T]: ...

    def save(self, entity: T) -> T: ...

    def delete(self, entity_id: int) -> None: ...


class EntityService(Generic[T]):
    """Search, uniqueness check and lookup over one repository."""

    #: Human readable name used in log lines and ``NotFoundError``.
    resource: str = "Entity"
    #: Attribute of the entity holding its natural key.
    key_field: str = "name"
    #: Repository method returning the record with a given key, or ``None``.
    key_lookup: str = "find_by_name"

    def __init__(self, repository: Repository[T]):
        self.repository = repository

    async def list_all(self, keyword: Optional[str] = None) -> List[T]:
        """Return every record, or the repository's matches for ``keyword``.

        ``None`` and the empty string both mean "no filter".  Ordering
        and matching are entirely up to the repository.
        """
        if not keyword:
            return self.repository.find_all()
        return self.repository.search(keyword)

    async def check_unique(self, candidate: T) -> bool:
        """Return ``True`` if no stored record has the candidate's key.

        The candidate's own id is not consulted: re-checking a stored
        record against itself reports a conflict.
        """
        lookup = getattr(self.repository, self.key_lookup)
        existing = lookup(getattr(candidate, self.key_field))
        return existing is None

    async def get(self, entity_id: int) -> T:
        """Return the record with ``entity_id`` or raise ``NotFoundError``."""
        entity = self.repository.find_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.resource, entity_id)
        return entity

    async def save(self, entity: T) -> T:
        saved = self.repository.save(entity)
        logger.info("%s saved: %s", self.resource, getattr(saved, "id", None))
        return saved

    async def delete(self, entity_id: int) -> None:
        self.repository.delete(entity_id)
        logger.info("%s %s deleted", self.resource, entity_id)
