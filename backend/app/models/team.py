"""Team ORM — a named group that match logs can be filed under.

Invariants:
    - name is unique
    - Deleting a team detaches its match logs (team_id set to NULL), never deletes them
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Team(Base):
    """Team entity — owns zero or more match logs."""
    __tablename__ = "teams"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )

    match_logs: Mapped[list["MatchLog"]] = relationship(
        "MatchLog", back_populates="team", passive_deletes=True,
    )
