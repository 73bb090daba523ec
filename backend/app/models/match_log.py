"""MatchLog ORM — the recorded result of one three- or four-player match.

Invariants:
    - mode is "four" or "three" (core/domain_types.MatchMode)
    - len(players) == len(scores) == seat count of mode (checked by MatchLogManager)
    - team_id is optional; the FK nulls out when the team is deleted

Design Decisions:
    - JSON columns for players/scores: a match is always read whole, never queried per seat
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, Text, DateTime, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MatchLog(Base):
    __tablename__ = "match_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    mode: Mapped[str] = mapped_column(String(10), nullable=False)
    players: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    scores: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    team_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("teams.id", ondelete="SET NULL"), nullable=True,
    )
    memo: Mapped[str | None] = mapped_column(Text, nullable=True)
    played_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )

    team: Mapped["Team | None"] = relationship(
        "Team", back_populates="match_logs",
    )
