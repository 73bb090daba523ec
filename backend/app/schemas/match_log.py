"""Match Log Schemas — payload validation and response projections for match logs.

Invariants:
    - MatchLogCreate: players and scores both have exactly mode.seats entries
    - MatchLogUpdate: seat-count consistency is checked by the manager after
      merging with the stored entity (a PATCH may carry only one of the lists)
    - memo only appears in the single-entity projection

Design Decisions:
    - MatchMode enum for mode: Pydantic rejects unknown formats natively
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.core.domain_types import MatchMode


class MatchLogCreate(BaseModel):
    """New match result."""
    model_config = ConfigDict(use_enum_values=True)

    mode: MatchMode
    players: list[str] = Field(min_length=3, max_length=4)
    scores: list[int] = Field(min_length=3, max_length=4)
    team_id: int | None = None
    memo: str | None = Field(None, max_length=2000)
    played_at: datetime | None = None

    @field_validator("players")
    @classmethod
    def strip_players(cls, v: list[str]) -> list[str]:
        stripped = [p.strip() for p in v]
        if any(not p for p in stripped):
            raise ValueError("player names cannot be empty")
        return stripped

    @model_validator(mode="after")
    def validate_seats(self):
        check_seats(self.mode, self.players, self.scores)
        return self


class MatchLogUpdate(BaseModel):
    """Partial match update."""
    model_config = ConfigDict(use_enum_values=True)

    mode: MatchMode | None = None
    players: list[str] | None = Field(None, min_length=3, max_length=4)
    scores: list[int] | None = Field(None, min_length=3, max_length=4)
    team_id: int | None = None
    memo: str | None = Field(None, max_length=2000)
    played_at: datetime | None = None

    @field_validator("mode", "players", "scores", "played_at")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v


def check_seats(mode: MatchMode, players: list, scores: list) -> None:
    """Raise ValueError unless both lists fill every seat of the mode."""
    seats = MatchMode(mode).seats
    if len(players) != seats or len(scores) != seats:
        raise ValueError(
            f"{MatchMode(mode).value}-player match needs {seats} players "
            f"and {seats} scores",
        )


class MatchLogView(BaseModel):
    """Single match projection."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    mode: MatchMode
    players: list[str]
    scores: list[int]
    team_id: int | None = None
    memo: str | None = None
    played_at: datetime


class MatchLogListItem(BaseModel):
    """List projection — memo omitted."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    mode: MatchMode
    players: list[str]
    scores: list[int]
    team_id: int | None = None
    played_at: datetime


class MatchLogSummary(BaseModel):
    """Projection returned after create/update."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    mode: MatchMode
    played_at: datetime
