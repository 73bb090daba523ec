"""Team Manager — team persistence (no rules beyond schema validation)."""

from app.models.team import Team
from app.schemas.team import TeamCreate, TeamUpdate
from app.services.resource_manager import ResourceManager


class TeamManager(ResourceManager[Team]):
    model = Team
    resource_name = "team"
    create_schema = TeamCreate
    update_schema = TeamUpdate
