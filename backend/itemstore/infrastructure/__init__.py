"""Infrastructure Layer — persistence medium access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every driver error is mapped to PersistenceError before leaving this layer

Design Decisions:
    - One session manager owns the engine; stores borrow sessions from it
"""
