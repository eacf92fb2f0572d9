"""Services Layer — ItemStore implementations and their wiring.

Invariants:
    - Every store satisfies core.repository_protocols.ItemStore
    - Stores receive their collaborators (session manager, clock) explicitly

Design Decisions:
    - Imperative shell around the pure core: IO and locking live here, Item values in core/
"""
