"""Error Hierarchy — typed, categorized exceptions for all guestbook failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors are 400-level; store errors are 500-level
    - to_response() produces the flat REST envelope {"error": message}
    - No driver or SQL details in user-facing messages (they go to the log only)
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    STORE = "store"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for the log record."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field_name: str | None = None


class GuestbookError(Exception):
    """Base exception for all guestbook errors."""

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
        """Convert to the REST error body."""
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(GuestbookError):
    """Comment input rejected before reaching the store."""
    def __init__(
        self, message: str, field: str = "text", context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field_name = field
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.field = field


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(GuestbookError):
    """Backing store operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            message, "STORE_ERROR", ErrorCategory.STORE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
