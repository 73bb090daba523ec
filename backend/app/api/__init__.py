"""API Layer — composer, controllers, middleware units and the error chain.

Invariants:
    - Controllers registered explicitly in main.py (no auto-discovery)
    - Every failure that is not a single-GET NotFound ends in the error chain

Design Decisions:
    - Thin controllers delegate to managers in services/
"""
