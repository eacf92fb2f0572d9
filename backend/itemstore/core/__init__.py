"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Item values are immutable snapshots

Design Decisions:
    - Functional core separated from imperative shell: stores live in services/
"""
