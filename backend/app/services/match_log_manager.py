"""Match Log Manager — match persistence with seat and team checks.

Invariants:
    - After any create/update, len(players) == len(scores) == seats of mode
    - team_id, when set, references an existing team

Design Decisions:
    - Team existence checked explicitly: SQLite does not enforce foreign keys by
      default, and a clear 400 beats a driver-specific integrity error
"""

from typing import Any

from app.core.errors import EntityValidationError
from app.models.match_log import MatchLog
from app.models.team import Team
from app.schemas.match_log import MatchLogCreate, MatchLogUpdate, check_seats
from app.services.resource_manager import ResourceManager
from app.infrastructure.database import store_errors


class MatchLogManager(ResourceManager[MatchLog]):
    model = MatchLog
    resource_name = "match log"
    create_schema = MatchLogCreate
    update_schema = MatchLogUpdate

    async def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        await self._check_team(data.get("team_id"))
        return data

    async def _prepare_update(
        self, entity: MatchLog, changes: dict[str, Any],
    ) -> dict[str, Any]:
        try:
            check_seats(
                changes.get("mode", entity.mode),
                changes.get("players", entity.players),
                changes.get("scores", entity.scores),
            )
        except ValueError as e:
            raise EntityValidationError(
                f"Invalid {self.resource_name} data",
                details=[{"field": "players", "message": str(e), "type": "value_error"}],
            ) from e
        if "team_id" in changes:
            await self._check_team(changes["team_id"])
        return changes

    async def _check_team(self, team_id: int | None) -> None:
        if team_id is None:
            return
        async with store_errors(self.db, "get"):
            team = await self.db.get(Team, team_id)
        if team is None:
            raise EntityValidationError(
                f"team {team_id} does not exist",
                details=[{
                    "field": "team_id",
                    "message": "unknown team",
                    "type": "value_error",
                }],
            )
