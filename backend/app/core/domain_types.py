"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps int, never a bare int in store signatures
    - Field bounds live here once; validator and ORM column sizes read them
    - All rule names encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Frozen dataclasses for filters/violations: hashable, comparable in tests
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Field Bounds ────────────────────────────────────────────────

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
AGE_MIN = 0
AGE_MAX = 130

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class ValidationRule(str, Enum):
    """Constraint kinds reported by the validator."""
    REQUIRED = "required"
    LENGTH = "length"
    EMAIL = "email"
    RANGE = "range"


# ─── Value Objects ───────────────────────────────────────────────

@dataclass(frozen=True)
class Violation:
    """One failed constraint on one field."""
    field: str
    rule: ValidationRule
    message: str


@dataclass(frozen=True)
class UserFilter:
    """Equality filters for listing. None means no constraint."""
    name: str | None = None
    age: int | None = None


@dataclass(frozen=True)
class PageRequest:
    """1-based page window. Non-positive values fall back to defaults."""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def __post_init__(self):
        if self.page < 1:
            object.__setattr__(self, "page", DEFAULT_PAGE)
        if self.limit < 1:
            object.__setattr__(self, "limit", DEFAULT_LIMIT)

    @property
    def offset(self) -> int:
        # Past the last bindable offset every page is empty anyway
        return min((self.page - 1) * self.limit, INT64_MAX)
