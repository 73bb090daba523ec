"""Error Hierarchy — typed, categorized exceptions for all Matchbook failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope consumed by the error chain
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with MatchbookError base: one error unit handles every
      classified failure (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - RegistrationError never reaches a client: it is raised while the
      application is being composed, before any port is bound
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    CONFLICT = "conflict"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    key: str | None = None


class MatchbookError(Exception):
    """Base exception for all Matchbook errors."""

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

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "resource": self.context.resource,
                    "key": self.context.key,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class EntityValidationError(MatchbookError):
    """Payload could not be coerced to the entity shape."""
    def __init__(
        self,
        message: str,
        details: list[dict] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.details = details or []

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response


class ResourceNotFoundError(MatchbookError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource = resource_type
        ctx.key = None if resource_id is None else str(resource_id)
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(MatchbookError):
    """Database operation failed."""
    def __init__(
        self,
        message: str,
        operation: str,
        context: ErrorContext | None = None,
        code: str = "DATABASE_ERROR",
        category: ErrorCategory = ErrorCategory.DATABASE,
        http_status: int = 503,
    ):
        super().__init__(
            f"Database {operation} failed: {message}",
            code, category, ErrorSeverity.CRITICAL, context, http_status,
        )
        self.operation = operation


class ConstraintViolationError(DatabaseError):
    """Write rejected by a store constraint (unique key, foreign key)."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            "Integrity constraint violated", operation, context,
            code="CONSTRAINT_VIOLATION", category=ErrorCategory.CONFLICT,
            http_status=409,
        )
        self.severity = ErrorSeverity.ERROR


class RegistrationError(MatchbookError):
    """Application composition rule broken (fatal at startup)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "REGISTRATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
