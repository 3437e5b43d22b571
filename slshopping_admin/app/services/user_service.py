"""
Business logic for console users.

Users are unique by e-mail address.  Passwords are hashed here, right
before the user is handed to the repository, so the plain text typed
into the form never reaches storage.
"""

from typing import List, Optional

from slshopping_admin.app.core.errors import NotFoundError
from slshopping_admin.app.core.security import hash_password
from slshopping_admin.app.repositories.role_repository import RoleRepository
from slshopping_admin.app.schemas.user import Role, User

from .base import EntityService, Repository


class UserService(EntityService[User]):
    resource = "User"
    key_field = "email"
    key_lookup = "find_by_email"

    def __init__(self, repository: Repository[User], role_repository: Optional[RoleRepository] = None):
        super().__init__(repository)
        self.role_repository = role_repository or RoleRepository()

    async def list_roles(self) -> List[Role]:
        """Return every role an operator can assign."""
        return self.role_repository.find_all()

    async def save(self, user: User) -> User:
        """Hash the submitted password and persist ``user``.

        Saving an existing user with an empty password keeps the hash
        already stored for it; ``NotFoundError`` is raised when that user
        no longer exists.
        """
        if user.password:
            user = user.model_copy(update={"password": hash_password(user.password)})
        elif user.id is not None:
            stored = self.repository.find_by_id(user.id)
            if stored is None:
                raise NotFoundError(self.resource, user.id)
            user = user.model_copy(update={"password": stored.password})
        return await super().save(user)
