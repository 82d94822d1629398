"""Error Hierarchy — typed, categorized exceptions for all User Registry failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the HTTP status it maps to; handlers never pick statuses ad hoc
    - Client errors (400-level) are recoverable; store errors (500-level) are critical
    - to_response() produces the plain-text body sent to the client

Design Decisions:
    - Single hierarchy with UserRegistryError base: one FastAPI handler catches all
    - Plain-text bodies over JSON envelopes: status code is the primary signal
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from app.core.domain_types import Violation
from app.core.validate_user import format_violations


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    PARSE = "parse"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Context attached to an error for log correlation."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    operation: str | None = None


class UserRegistryError(Exception):
    """Base exception for all User Registry errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> str:
        """Body of the plain-text error response."""
        return self.message


# ─── Client Errors (400-level) ──────────────────────────────────

class ParseError(UserRegistryError):
    """Request body could not be decoded."""
    def __init__(self, message: str = "Invalid request", context: ErrorContext | None = None):
        super().__init__(
            message, "PARSE_ERROR", ErrorCategory.PARSE,
            ErrorSeverity.WARNING, context, 400,
        )


class UserValidationError(UserRegistryError):
    """User payload violates one or more field constraints."""
    def __init__(self, violations: list[Violation], context: ErrorContext | None = None):
        super().__init__(
            format_violations(violations), "VALIDATION_ERROR",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, context, 400,
        )
        self.violations = violations


class NotFoundError(UserRegistryError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_id = resource_id
        super().__init__(
            f"{resource_type} not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class AuthError(UserRegistryError):
    """Credentials did not match."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Unauthorized", "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(UserRegistryError):
    """Database operation failed. Message carries the driver's reason."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            message, "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
