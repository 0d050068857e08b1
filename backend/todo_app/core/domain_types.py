"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, CategoryId, TodoId wrap UUIDs — never use bare UUID in domain logic
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
CategoryId = NewType("CategoryId", UUID)
TodoId = NewType("TodoId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """Account roles — registration always assigns USER."""
    USER = "user"
    ADMIN = "admin"


class Priority(str, Enum):
    """Todo priority — maps to DB `priority` column."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


DEFAULT_PRIORITY = Priority.MEDIUM
