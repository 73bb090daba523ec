"""User Controller — /api/users. Credentials are never projected."""

from app.api.controllers.base import Projections, ResourceController
from app.schemas.user import UserSummary, UserView
from app.services.user_manager import UserManager


class UserController(ResourceController):
    path = "/api/users"
    manager_class = UserManager
    projections = Projections(
        detail=UserView,
        listing=UserView,
        created=UserSummary,
        updated=UserSummary,
    )
