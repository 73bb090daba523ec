"""User Manager — user persistence with credential hashing.

Invariants:
    - The plain password is replaced by password_hash before the entity is built
    - A PATCH carrying password re-hashes it; other fields untouched
"""

from typing import Any

from app.config import get_settings
from app.core.passwords import hash_password
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate
from app.services.resource_manager import ResourceManager


class UserManager(ResourceManager[User]):
    model = User
    resource_name = "user"
    create_schema = UserCreate
    update_schema = UserUpdate

    async def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        return _hash_password_field(data)

    async def _prepare_update(
        self, entity: User, changes: dict[str, Any],
    ) -> dict[str, Any]:
        return _hash_password_field(changes)


def _hash_password_field(data: dict[str, Any]) -> dict[str, Any]:
    if "password" not in data:
        return data
    data = dict(data)
    password = data.pop("password")
    data["password_hash"] = hash_password(
        password, get_settings().password_hash_iterations,
    )
    return data
