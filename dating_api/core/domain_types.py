"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, MessageId, PhotoId wrap ints — never mix them in signatures
    - Gender is binary-valued for filtering purposes
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
MessageId = NewType("MessageId", int)
PhotoId = NewType("PhotoId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Gender(str, Enum):
    """Gender values used by the discovery filter."""
    MALE = "male"
    FEMALE = "female"

    @property
    def opposite(self) -> "Gender":
        return Gender.FEMALE if self is Gender.MALE else Gender.MALE
