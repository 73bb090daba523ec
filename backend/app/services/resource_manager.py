"""Resource Manager — generic data access for one entity kind over an AsyncSession.

Invariants:
    - get_by_id never raises for a missing key; it returns NOT_FOUND
    - update/remove raise ResourceNotFoundError for a missing key (second remove fails)
    - update applies only the fields present in the payload
    - Every mutation commits; every read goes to the store (no caches)
    - Payloads are validated here, not in the controller; failures raise
      EntityValidationError with field-level details

Design Decisions:
    - One manager instance per request session: no shared mutable state between requests
    - Subclasses declare model + schemas and override _prepare_create/_prepare_update
      for resource-specific rules (ADR: explicit hooks over metaprogramming)
    - Path keys arrive as strings; a key that cannot be coerced can never exist,
      so it is treated as NotFound rather than as a validation failure
    - Keys outside the Integer column range are NotFound too; they never reach
      the driver, which would reject them with an overflow error
"""

import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Found, Lookup, NOT_FOUND
from app.core.errors import EntityValidationError, ResourceNotFoundError
from app.db.base import Base
from app.infrastructure.database import store_errors

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Range of the Integer primary key column; anything outside can never exist.
MIN_KEY = 1
MAX_KEY = 2**31 - 1


def format_validation_details(exc: ValidationError) -> list[dict]:
    """Flatten Pydantic errors into field/message/type triples."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]


class ResourceManager(Generic[ModelT]):
    """CRUD over a single ORM model."""

    model: type[ModelT]
    resource_name: str
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Reads ──────────────────────────────────────────────────

    async def get_by_id(self, key: Any) -> Lookup[ModelT]:
        pk = self._coerce_key(key)
        if pk is None:
            return NOT_FOUND
        async with store_errors(self.db, "get"):
            entity = await self.db.get(self.model, pk)
        if entity is None:
            return NOT_FOUND
        return Found(entity)

    async def get_all(self) -> list[ModelT]:
        async with store_errors(self.db, "list"):
            result = await self.db.execute(
                select(self.model).order_by(self.model.id),
            )
            return list(result.scalars().all())

    # ─── Mutations ──────────────────────────────────────────────

    async def create(self, payload: dict[str, Any]) -> ModelT:
        data = self._validate(self.create_schema, payload).model_dump(
            exclude_none=True,
        )
        data = await self._prepare_create(data)
        entity = self.model(**data)
        async with store_errors(self.db, "insert"):
            self.db.add(entity)
            await self.db.commit()
            await self.db.refresh(entity)
        logger.info(
            f"Created {self.resource_name} {entity.id}",
            extra={"resource": self.resource_name, "key": str(entity.id)},
        )
        return entity

    async def update(self, key: Any, payload: dict[str, Any]) -> ModelT:
        entity = await self._require(key)
        changes = self._validate(self.update_schema, payload).model_dump(
            exclude_unset=True,
        )
        changes = await self._prepare_update(entity, changes)
        for name, value in changes.items():
            setattr(entity, name, value)
        async with store_errors(self.db, "update"):
            await self.db.commit()
            await self.db.refresh(entity)
        logger.info(
            f"Updated {self.resource_name} {entity.id}: {sorted(changes)}",
            extra={"resource": self.resource_name, "key": str(entity.id)},
        )
        return entity

    async def remove(self, key: Any) -> None:
        entity = await self._require(key)
        async with store_errors(self.db, "delete"):
            await self.db.delete(entity)
            await self.db.commit()
        logger.info(
            f"Removed {self.resource_name} {key}",
            extra={"resource": self.resource_name, "key": str(key)},
        )

    # ─── Hooks ──────────────────────────────────────────────────

    async def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        """Map validated payload fields to column values."""
        return data

    async def _prepare_update(
        self, entity: ModelT, changes: dict[str, Any],
    ) -> dict[str, Any]:
        """Map validated partial fields to column values."""
        return changes

    # ─── Helpers ────────────────────────────────────────────────

    async def _require(self, key: Any) -> ModelT:
        lookup = await self.get_by_id(key)
        if not isinstance(lookup, Found):
            raise ResourceNotFoundError(self.resource_name, key)
        return lookup.entity

    def _validate(self, schema: type[BaseModel], payload: Any) -> BaseModel:
        if not isinstance(payload, dict):
            raise EntityValidationError(
                f"{self.resource_name} payload must be a JSON object",
            )
        try:
            return schema.model_validate(payload)
        except ValidationError as e:
            raise EntityValidationError(
                f"Invalid {self.resource_name} data",
                details=format_validation_details(e),
            ) from e

    @staticmethod
    def _coerce_key(key: Any) -> int | None:
        if key is None or isinstance(key, bool):
            return None
        if isinstance(key, int):
            pk = key
        else:
            try:
                pk = int(str(key).strip())
            except ValueError:
                return None
        if not MIN_KEY <= pk <= MAX_KEY:
            return None
        return pk
