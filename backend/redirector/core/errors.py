"""Error Hierarchy: typed, categorized exceptions for redirector failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the REST envelope rendered by api/error_handlers.py
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with RedirectorError base: one global handler catches all
    - Transport failures are NOT modelled here; they reach the catch-all handler
"""

from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


class RedirectorError(Exception):
    """Base exception for all redirector errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.timestamp = datetime.now(timezone.utc)

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.timestamp.isoformat(),
            }
        }


# ─── Configuration Errors (500-level) ───────────────────────────

class InvalidRedirectTargetError(RedirectorError):
    """Configured redirect location or status code is unusable."""
    def __init__(self, message: str, field: str):
        super().__init__(
            f"Invalid redirect target: {message}",
            "INVALID_REDIRECT_TARGET", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, 500,
        )
        self.field = field


class RedirectNotConfiguredError(RedirectorError):
    """Application was assembled without a redirect target."""
    def __init__(self):
        super().__init__(
            "No redirect target is configured",
            "REDIRECT_NOT_CONFIGURED", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, 500,
        )
