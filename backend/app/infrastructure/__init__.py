"""Infrastructure Layer — database sessions and logging setup.

Invariants:
    - Infrastructure never imports from api/ or services/

Design Decisions:
    - Module-level singletons initialized in the application lifespan, never at import
"""
