"""Resource Controller — binds HTTP verbs to one manager and shapes responses.

Invariants:
    - Each handler makes exactly one manager call and produces exactly one response
    - Only one failure is answered locally: NotFound on single GET → 404
      {"error": "<resource> not found"}; every other failure is raised to the
      error chain untouched
    - Responses are built from explicit projection schemas, never from the
      raw entity, so credential columns cannot leak

Design Decisions:
    - Binding table lives in create_router() once for every resource; subclasses
      only declare path, manager_class and projections
    - Body read as raw JSON (Body(None)): shape validation belongs to the manager
    - DELETE on the collection root removes key None, which is always NotFound
"""

from dataclasses import dataclass
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Found
from app.core.repository_protocols import ResourceManagerLike
from app.infrastructure.database import get_db
from app.services.resource_manager import ResourceManager


@dataclass(frozen=True)
class Projections:
    """Allow-listed response shapes for one resource kind."""
    detail: type[BaseModel]
    listing: type[BaseModel]
    created: type[BaseModel]
    updated: type[BaseModel]


def project(schema: type[BaseModel], entity: Any) -> dict:
    """Read only the schema's fields from entity, JSON-ready."""
    return schema.model_validate(entity).model_dump(mode="json")


class ResourceController:
    """Generic CRUD controller; one subclass per resource kind."""

    path: str
    manager_class: type[ResourceManager]
    projections: Projections

    def __init__(self):
        self.router = self.create_router()

    @property
    def resource_name(self) -> str:
        return self.manager_class.resource_name

    def create_router(self) -> APIRouter:
        router = APIRouter(tags=[self.resource_name])

        router.add_api_route("/{key}", self.get_one, methods=["GET"])
        router.add_api_route("/", self.get_all, methods=["GET"])
        router.add_api_route(
            "/", self.post, methods=["POST"], status_code=status.HTTP_201_CREATED,
        )
        router.add_api_route("/{key}", self.patch, methods=["PATCH"])
        router.add_api_route("/", self.delete_root, methods=["DELETE"])
        router.add_api_route("/{key}", self.delete, methods=["DELETE"])

        return router

    def manager(self, db: AsyncSession) -> ResourceManagerLike:
        return self.manager_class(db)

    async def get_one(
        self, key: str, db: AsyncSession = Depends(get_db),
    ) -> Response:
        lookup = await self.manager(db).get_by_id(key)
        if not isinstance(lookup, Found):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"error": f"{self.resource_name} not found"},
            )
        return JSONResponse(project(self.projections.detail, lookup.entity))

    async def get_all(self, db: AsyncSession = Depends(get_db)) -> Response:
        entities = await self.manager(db).get_all()
        return JSONResponse(
            [project(self.projections.listing, entity) for entity in entities],
        )

    async def post(
        self, payload: Any = Body(None), db: AsyncSession = Depends(get_db),
    ) -> Response:
        entity = await self.manager(db).create(payload)
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=project(self.projections.created, entity),
        )

    async def patch(
        self, key: str, payload: Any = Body(None), db: AsyncSession = Depends(get_db),
    ) -> Response:
        entity = await self.manager(db).update(key, payload)
        return JSONResponse(project(self.projections.updated, entity))

    async def delete(
        self, key: str, db: AsyncSession = Depends(get_db),
    ) -> Response:
        await self.manager(db).remove(key)
        return Response(status_code=status.HTTP_200_OK)

    async def delete_root(self, db: AsyncSession = Depends(get_db)) -> Response:
        await self.manager(db).remove(None)
        return Response(status_code=status.HTTP_200_OK)
