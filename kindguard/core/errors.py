"""Error Hierarchy — typed, categorized exceptions for kindguard failure modes.

Invariants:
    - Predicates never raise: these errors come only from name lookups and enforcement helpers
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_dict() produces the same envelope shape for every subclass

Design Decisions:
    - Single hierarchy with KindGuardError base: callers catch one type (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    predicate_name: str | None = None
    expected: str | None = None
    actual: str | None = None


class KindGuardError(Exception):
    """Base exception for all kindguard errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "predicate_name": self.context.predicate_name,
                    "expected": self.context.expected,
                    "actual": self.context.actual,
                },
            }
        }


# ─── Lookup Errors ───────────────────────────────────────────────

class UnknownPredicateError(KindGuardError):
    """No predicate registered under the requested name."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.predicate_name = name
        super().__init__(
            f"Unknown predicate '{name}'",
            "UNKNOWN_PREDICATE", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx,
        )
        self.name = name


# ─── Enforcement Errors ──────────────────────────────────────────

class TypeNarrowingError(KindGuardError):
    """Value failed the predicate it was required to satisfy."""
    def __init__(self, expected: str, actual: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.predicate_name = expected
        ctx.expected = expected
        ctx.actual = actual
        super().__init__(
            f"Expected a value of type '{expected}', got '{actual}'",
            "TYPE_MISMATCH", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.expected = expected
        self.actual = actual
