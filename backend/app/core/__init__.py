"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (password salts aside)

Design Decisions:
    - Functional core separated from imperative shell
"""
