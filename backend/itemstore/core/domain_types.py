"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ItemId wraps a UUID — never pass bare strings as identifiers in domain logic
    - All valid configuration choices encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and env vars without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ItemId = NewType("ItemId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class StoreBackend(str, Enum):
    """Where an ItemStore keeps its Items."""
    SQL = "sql"
    MEMORY = "memory"


class StoreOperation(str, Enum):
    """Store operations, used for error context and log extras."""
    CREATE = "create"
    LIST = "list"
    GET = "get"
    COUNT = "count"
    DELETE = "delete"
