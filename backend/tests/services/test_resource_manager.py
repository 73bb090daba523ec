"""Resource Manager — CRUD semantics against a real (SQLite) session.

Tests cover:
    - get_by_id returns NOT_FOUND (never raises) for missing or malformed keys
    - get_all is a materialized list in key order
    - update is partial; update/remove on a missing key raise ResourceNotFoundError
    - remove is not idempotent
    - invalid payloads raise EntityValidationError with field details
"""

import pytest

from app.core.domain_types import Found, NOT_FOUND
from app.core.errors import (
    ConstraintViolationError, EntityValidationError, ResourceNotFoundError,
)
from app.services.team_manager import TeamManager
from app.services.user_manager import UserManager


def _user(name: str = "alice") -> dict:
    return {"username": name, "email": f"{name}@x.com", "password": "secret"}


async def test_create_then_get_by_id(test_db):
    manager = UserManager(test_db)
    user = await manager.create(_user())
    lookup = await manager.get_by_id(user.id)
    assert isinstance(lookup, Found)
    assert lookup.entity.username == "alice"


@pytest.mark.parametrize(
    "key", [999, "999", "abc", None, True, 0, -1, 2**31, "99999999999999999999"],
)
async def test_get_by_id_missing_returns_sentinel(test_db, key):
    assert await UserManager(test_db).get_by_id(key) is NOT_FOUND


async def test_get_all_is_ordered_list(test_db):
    manager = UserManager(test_db)
    for name in ("carol", "alice", "bob"):
        await manager.create(_user(name))
    users = await manager.get_all()
    assert isinstance(users, list)
    assert [u.username for u in users] == ["carol", "alice", "bob"]
    assert [u.id for u in users] == sorted(u.id for u in users)


async def test_update_is_partial(test_db):
    manager = UserManager(test_db)
    user = await manager.create(_user())
    hash_before = user.password_hash
    updated = await manager.update(str(user.id), {"email": "new@x.com"})
    assert updated.email == "new@x.com"
    assert updated.username == "alice"
    assert updated.password_hash == hash_before


async def test_update_missing_key_raises(test_db):
    with pytest.raises(ResourceNotFoundError):
        await UserManager(test_db).update(1, {"username": "x"})


async def test_remove_twice_fails(test_db):
    manager = TeamManager(test_db)
    team = await manager.create({"name": "Red"})
    await manager.remove(team.id)
    assert await manager.get_by_id(team.id) is NOT_FOUND
    with pytest.raises(ResourceNotFoundError):
        await manager.remove(team.id)


async def test_invalid_payload_raises_with_details(test_db):
    with pytest.raises(EntityValidationError) as info:
        await UserManager(test_db).create({"username": "", "email": "nope"})
    fields = {d["field"] for d in info.value.details}
    assert {"username", "email", "password"} <= fields


async def test_unique_violation_maps_to_constraint_error(test_db):
    manager = TeamManager(test_db)
    await manager.create({"name": "Red"})
    with pytest.raises(ConstraintViolationError):
        await manager.create({"name": "Red"})
    # session is usable after the rollback
    assert len(await manager.get_all()) == 1


async def test_managers_satisfy_controller_protocol(test_db):
    from app.core.repository_protocols import ResourceManagerLike
    from app.services.match_log_manager import MatchLogManager

    for manager_class in (UserManager, TeamManager, MatchLogManager):
        assert isinstance(manager_class(test_db), ResourceManagerLike)
