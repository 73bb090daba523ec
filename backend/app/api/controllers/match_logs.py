"""Match Log Controller — /api/match-logs. memo is only shown on single reads."""

from app.api.controllers.base import Projections, ResourceController
from app.schemas.match_log import MatchLogListItem, MatchLogSummary, MatchLogView
from app.services.match_log_manager import MatchLogManager


class MatchLogController(ResourceController):
    path = "/api/match-logs"
    manager_class = MatchLogManager
    projections = Projections(
        detail=MatchLogView,
        listing=MatchLogListItem,
        created=MatchLogSummary,
        updated=MatchLogSummary,
    )
