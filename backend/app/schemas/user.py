"""User Schemas — payload validation and response projections for users.

Invariants:
    - UserCreate: username 1-50 chars (stripped), email shaped like an address,
      password 4-128 chars
    - UserUpdate: every field optional, none nullable
    - No projection schema declares password or password_hash

Design Decisions:
    - Regex over EmailStr: avoids the email-validator extra for a shape check
    - Projections are explicit schemas read from ORM attributes (from_attributes)
      so a new column never leaks into a response by accident
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


def _strip_required(v: str | None) -> str:
    if v is None:
        raise ValueError("field cannot be null")
    v = v.strip()
    if not v:
        raise ValueError("field cannot be empty or whitespace")
    return v


class UserCreate(BaseModel):
    """User registration payload."""
    username: str = Field(min_length=1, max_length=50)
    email: str = Field(max_length=255, pattern=_EMAIL_PATTERN)
    password: str = Field(min_length=4, max_length=128)

    @field_validator("username", "email")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return _strip_required(v)


class UserUpdate(BaseModel):
    """Partial user update — only fields present in the payload are applied."""
    username: str | None = Field(None, min_length=1, max_length=50)
    email: str | None = Field(None, max_length=255, pattern=_EMAIL_PATTERN)
    password: str | None = Field(None, min_length=4, max_length=128)

    @field_validator("username", "email", "password")
    @classmethod
    def reject_null(cls, v: str | None) -> str:
        return _strip_required(v)


class UserView(BaseModel):
    """Public user projection (single and list reads)."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str


class UserSummary(BaseModel):
    """Projection returned after create/update."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
