"""Error Hierarchy — typed exceptions for every Notekeeper failure mode.

Invariants:
    - Every error has a code (str), kind (FailureKind), severity (ErrorSeverity)
    - A note owned by another profile produces exactly the same error as a
      missing note (no existence leakage through a separate forbidden kind)
    - No store detail leaked in user-facing messages
    - HTTP status mapping lives in the API layer, not here

Design Decisions:
    - Single hierarchy with NotekeeperError base: the API handler catches all
    - Errors are values first: managers return them inside a Result and only
      the API layer raises them (Result.unwrap)
    - ErrorContext as dataclass: observability without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from notekeeper.core.domain_types import FailureKind


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@dataclass
class ErrorContext:
    """Identifiers involved in the failing operation (logged, never rendered)."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    principal_id: int | None = None
    profile_id: int | None = None
    note_id: int | None = None


class NotekeeperError(Exception):
    """Base exception for all Notekeeper errors."""

    def __init__(
        self,
        message: str,
        code: str,
        kind: FailureKind,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "kind": self.kind.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }

    def log_extra(self) -> dict:
        """Fields for logger `extra=` (JSONFormatter surfaces them)."""
        return {
            "error_code": self.code,
            "principal_id": self.context.principal_id,
            "profile_id": self.context.profile_id,
            "note_id": self.context.note_id,
        }


# ─── Client Errors ──────────────────────────────────────────────

class ValidationError(NotekeeperError):
    """Required input missing or empty after trimming."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", FailureKind.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.field = field


class ProfileNotFoundError(NotekeeperError):
    """Principal has no (non-deleted) profile."""
    def __init__(
        self, message: str = "user profile not found", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "PROFILE_NOT_FOUND", FailureKind.NOT_FOUND_PROFILE,
            ErrorSeverity.WARNING, context,
        )


class NoteNotFoundError(NotekeeperError):
    """Note absent, soft-deleted, or owned by another profile."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "note not found", "NOTE_NOT_FOUND", FailureKind.NOT_FOUND_NOTE,
            ErrorSeverity.WARNING, context,
        )


class NoNotesFoundError(NotekeeperError):
    """Profile exists but owns zero live notes."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "no note found", "NO_NOTE_FOUND", FailureKind.NOT_FOUND_NOTE,
            ErrorSeverity.INFO, context,
        )


class ProfileConflictError(NotekeeperError):
    """A profile already exists for this principal."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "user profile found, no need to create a new one",
            "PROFILE_CONFLICT", FailureKind.CONFLICT,
            ErrorSeverity.WARNING, context,
        )


class NoChangeError(NotekeeperError):
    """Update carries no effective delta."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "no new info to update", "NO_CHANGE", FailureKind.NO_CHANGE,
            ErrorSeverity.INFO, context,
        )


# ─── Infrastructure Errors ──────────────────────────────────────

class InternalError(NotekeeperError):
    """Store failure. The underlying detail is logged, never rendered."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            "internal server error", "INTERNAL_ERROR", FailureKind.INTERNAL,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation
