"""Resource Controllers — one module per resource kind on a shared base.

Invariants:
    - Each controller owns a unique path prefix and its own APIRouter
    - Controllers are registered explicitly by the composer (no auto-discovery)
"""
