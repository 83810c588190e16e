"""Field Enforcement — trimming, required-field and no-op update rules.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return error on violation, None on success
    - Only nickname (profile) and title/body (note) are ever compared or applied

Design Decisions:
    - Pure functions over model validators: the same rules apply whether the
      input came over HTTP or from a script
    - body is compared verbatim (never trimmed); title and nickname trimmed
"""

from notekeeper.core.domain_types import InputField
from notekeeper.core.errors import ErrorContext, NoChangeError, ValidationError

NICKNAME_REQUIRED = "user nickname is required"
TITLE_REQUIRED = "title is required"


def trim_required(
    value: str | None, field: InputField, message: str,
    context: ErrorContext | None = None,
) -> tuple[str, ValidationError | None]:
    """Strip surrounding whitespace; empty (or missing) is a validation error."""
    trimmed = (value or "").strip()
    if not trimmed:
        return trimmed, ValidationError(message, field.value, context)
    return trimmed, None


def trim_nickname(
    value: str | None, context: ErrorContext | None = None,
) -> tuple[str, ValidationError | None]:
    return trim_required(value, InputField.NICKNAME, NICKNAME_REQUIRED, context)


def trim_title(
    value: str | None, context: ErrorContext | None = None,
) -> tuple[str, ValidationError | None]:
    return trim_required(value, InputField.TITLE, TITLE_REQUIRED, context)


def check_nickname_changed(
    current: str, requested: str, context: ErrorContext | None = None,
) -> NoChangeError | None:
    """Requested (already trimmed) nickname must differ from the stored one."""
    if requested == current:
        return NoChangeError(context)
    return None


def check_note_changed(
    current_title: str, current_body: str, title: str, body: str,
    context: ErrorContext | None = None,
) -> NoChangeError | None:
    """At least one of title / body must differ from the stored values."""
    if title == current_title and body == current_body:
        return NoChangeError(context)
    return None
