"""ORM Models — SQLAlchemy declarative models for all resource kinds.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model exposes an integer primary key named id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from app.models.user import User  # noqa: F401
from app.models.team import Team  # noqa: F401
from app.models.match_log import MatchLog  # noqa: F401
