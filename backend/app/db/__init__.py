"""Database Layer — declarative base, standalone session factory, seed loader.

Invariants:
    - Schema changes go through alembic migrations

Design Decisions:
    - Standalone session factory for scripts (seed loader) that run outside FastAPI
"""
