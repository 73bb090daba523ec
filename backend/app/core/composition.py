"""Composition Rules — pure checks behind the application registration phases.

Invariants:
    - Phases only move forward, exactly one step at a time
    - Path prefixes are normalized before comparison ("/api/users/" == "/api/users")
    - A prefix may be registered at most once per application

Design Decisions:
    - Kept out of api/: the rules are pure and testable without building an app
    - Violations raise RegistrationError; the composer lets it propagate so a
      misconfigured process never starts listening
"""

from collections.abc import Iterable

from app.core.domain_types import CompositionPhase
from app.core.errors import RegistrationError

_PHASE_ORDER: tuple[CompositionPhase, ...] = tuple(CompositionPhase)


def next_phase(current: CompositionPhase) -> CompositionPhase | None:
    """Return the phase that follows current, or None if terminal."""
    index = _PHASE_ORDER.index(current)
    if index + 1 >= len(_PHASE_ORDER):
        return None
    return _PHASE_ORDER[index + 1]


def advance_phase(
    current: CompositionPhase, target: CompositionPhase,
) -> CompositionPhase:
    """Validate a single forward step and return the new phase."""
    if next_phase(current) is not target:
        raise RegistrationError(
            f"Cannot move from {current.value} to {target.value}",
        )
    return target


def normalize_prefix(prefix: str) -> str:
    """Canonical form: leading slash, no trailing slash, no empty prefix."""
    cleaned = "/" + prefix.strip().strip("/")
    if cleaned == "/":
        raise RegistrationError("Controller path prefix cannot be empty")
    return cleaned


def check_unique_prefixes(prefixes: Iterable[str]) -> tuple[str, ...]:
    """Normalize prefixes and reject duplicates. Returns them in input order."""
    seen: list[str] = []
    for prefix in prefixes:
        normalized = normalize_prefix(prefix)
        if normalized in seen:
            raise RegistrationError(
                f"Path prefix '{normalized}' is registered more than once",
            )
        seen.append(normalized)
    return tuple(seen)
