"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Lookup results are values: Found(entity) or NOT_FOUND, never None
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NotFound as a singleton sentinel: controllers branch on a value instead of
      intercepting an exception for a normal outcome
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


# ─── Lookup Result ───────────────────────────────────────────────

@dataclass(frozen=True)
class Found(Generic[T]):
    """A single-key lookup that matched an entity."""
    entity: T


class NotFound:
    """A single-key lookup that matched nothing."""
    _instance: "NotFound | None" = None

    def __new__(cls) -> "NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFound()

Lookup = Found[T] | NotFound


# ─── Enums ───────────────────────────────────────────────────────

class MatchMode(str, Enum):
    """Match formats — value is the page suffix, seats is the player count."""
    FOUR = "four"
    THREE = "three"

    @property
    def seats(self) -> int:
        return 4 if self is MatchMode.FOUR else 3


class CompositionPhase(str, Enum):
    """Application lifecycle. Order of declaration is the only legal order."""
    CONSTRUCTING = "constructing"
    REGISTERING_MIDDLEWARE = "registering_middleware"
    REGISTERING_CONTROLLERS = "registering_controllers"
    REGISTERING_ERROR_HANDLERS = "registering_error_handlers"
    READY = "ready"
    LISTENING = "listening"
