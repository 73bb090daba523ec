"""Boundary Protocols — contracts between controllers and data access.

Invariants:
    - Controllers depend on ResourceManagerLike, never on a concrete manager
    - get_by_id returns a Lookup value; missing keys are not exceptions
    - Mutating methods commit before returning

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy required
    - Async in Protocol: implementations do IO against the store
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

from app.core.domain_types import Lookup

EntityT = TypeVar("EntityT")


@runtime_checkable
class ResourceManagerLike(Protocol[EntityT]):
    """Contract for one resource kind's persistence — implemented in services/."""
    resource_name: str

    async def create(self, payload: dict[str, Any]) -> EntityT: ...
    async def get_by_id(self, key: Any) -> Lookup[EntityT]: ...
    async def get_all(self) -> list[EntityT]: ...
    async def update(self, key: Any, payload: dict[str, Any]) -> EntityT: ...
    async def remove(self, key: Any) -> None: ...
