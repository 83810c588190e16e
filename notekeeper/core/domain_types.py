"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PrincipalId is opaque and already verified upstream; never re-authenticated here
    - ProfileId, NoteId are store-assigned surrogate keys
    - All failure kinds encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PrincipalId = NewType("PrincipalId", int)
ProfileId = NewType("ProfileId", int)
NoteId = NewType("NoteId", int)

# Largest value a BIGINT key column holds
MAX_KEY = 2**63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class FailureKind(str, Enum):
    """Machine-distinguishable failure kinds returned by the managers."""
    NOT_FOUND_PROFILE = "not_found_profile"
    NOT_FOUND_NOTE = "not_found_note"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    NO_CHANGE = "no_change"
    INTERNAL = "internal"


class InputField(str, Enum):
    """The only user-settable fields. Anything else in a payload is dropped."""
    NICKNAME = "nickname"
    TITLE = "title"
    BODY = "body"
