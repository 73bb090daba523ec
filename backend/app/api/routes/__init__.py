"""Route Modules — non-resource endpoints (health probes).

Invariants:
    - Each module defines its own APIRouter without a prefix; the composer mounts it
    - Routes never contain business logic
"""
