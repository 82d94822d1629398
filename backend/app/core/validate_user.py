"""User Validation — checks a candidate User against field constraints.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Every field is checked independently; all violations are reported
    - Empty list means valid

Design Decisions:
    - Return violations (not exceptions): handlers decide whether to raise,
      tests assert on the list directly
    - email-validator for syntax (same library behind pydantic's EmailStr),
      deliverability lookups disabled so validation never touches the network
"""

from email_validator import EmailNotValidError, validate_email

from app.core.domain_types import (
    AGE_MAX, AGE_MIN, NAME_MAX_LENGTH, NAME_MIN_LENGTH,
    ValidationRule, Violation,
)
from app.core.repository_protocols import UserLike


def check_name(name: str) -> Violation | None:
    if not name:
        return Violation("name", ValidationRule.REQUIRED, "is required")
    if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        return Violation(
            "name", ValidationRule.LENGTH,
            f"length must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH}",
        )
    return None


def check_email(email: str) -> Violation | None:
    if not email:
        return Violation("email", ValidationRule.REQUIRED, "is required")
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return Violation(
            "email", ValidationRule.EMAIL, "must be a valid email address",
        )
    return None


def check_age(age: int) -> Violation | None:
    if not AGE_MIN <= age <= AGE_MAX:
        return Violation(
            "age", ValidationRule.RANGE,
            f"must be between {AGE_MIN} and {AGE_MAX}",
        )
    return None


def validate_user(user: UserLike) -> list[Violation]:
    """Run every field check. Returns all violations in field order."""
    checks = (
        check_name(user.name),
        check_email(user.email),
        check_age(user.age),
    )
    return [v for v in checks if v is not None]


def format_violations(violations: list[Violation]) -> str:
    """Human-readable message: one 'field: message' per violation."""
    return "; ".join(f"{v.field}: {v.message}" for v in violations)
