"""Services Layer — one resource manager per entity kind.

Invariants:
    - Managers are built per request around the request's AsyncSession
    - All store failures leave as DatabaseError subclasses

Design Decisions:
    - Shared ResourceManager base; subclasses only add resource rules
"""
