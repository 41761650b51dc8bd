"""Error Hierarchy - typed, categorized exceptions for backend failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Configuration and database errors are critical: startup or request cannot proceed
    - to_response() produces the REST envelope used by the global handlers
    - Secrets (DB_PASSWORD) never appear in messages or debug_info

Design Decisions:
    - Single hierarchy with AppError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CONFIGURATION = "configuration"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    debug_info: dict[str, Any] | None = None


class AppError(Exception):
    """Base exception for all application errors."""

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
                    "path": self.context.path,
                },
            }
        }


# ─── Startup Errors ─────────────────────────────────────────────

class ConfigurationError(AppError):
    """Required configuration missing or unparseable."""
    def __init__(
        self,
        message: str,
        missing_keys: list[str] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.missing_keys = missing_keys or []


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(AppError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
