"""Pydantic Schemas — payload validation and response projections.

Invariants:
    - Create/Update schemas validate at the manager boundary
    - Projection schemas are the only way an entity becomes a response body

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
