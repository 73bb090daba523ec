"""Team Controller — /api/teams."""

from app.api.controllers.base import Projections, ResourceController
from app.schemas.team import TeamSummary, TeamView
from app.services.team_manager import TeamManager


class TeamController(ResourceController):
    path = "/api/teams"
    manager_class = TeamManager
    projections = Projections(
        detail=TeamView,
        listing=TeamView,
        created=TeamSummary,
        updated=TeamSummary,
    )
