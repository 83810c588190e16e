"""Field Enforcement — tests for pure trimming and no-op update rules.

Tests cover:
    - trim_nickname / trim_title strip whitespace and reject empty input
    - None treated as empty
    - check_nickname_changed / check_note_changed reject identical values
    - body compared verbatim (whitespace is a change)
"""

from notekeeper.core.domain_types import FailureKind
from notekeeper.core.enforce_fields import (
    NICKNAME_REQUIRED,
    TITLE_REQUIRED,
    check_nickname_changed,
    check_note_changed,
    trim_nickname,
    trim_title,
)
from notekeeper.core.errors import ErrorContext


# ─── trim_nickname / trim_title ──────────────────────────────────

def test_trim_nickname_strips_surrounding_whitespace():
    nickname, error = trim_nickname("  alice \n")
    assert error is None
    assert nickname == "alice"


def test_trim_nickname_rejects_whitespace_only():
    _, error = trim_nickname("   \t ")
    assert error is not None
    assert error.kind == FailureKind.VALIDATION
    assert error.message == NICKNAME_REQUIRED
    assert error.field == "nickname"


def test_trim_nickname_rejects_none():
    _, error = trim_nickname(None)
    assert error is not None
    assert error.code == "VALIDATION_ERROR"


def test_trim_title_rejects_empty_string():
    _, error = trim_title("")
    assert error is not None
    assert error.message == TITLE_REQUIRED
    assert error.field == "title"


def test_trim_title_keeps_inner_whitespace():
    title, error = trim_title("  shopping  list ")
    assert error is None
    assert title == "shopping  list"


def test_trim_carries_context_for_logging():
    ctx = ErrorContext(principal_id=7)
    _, error = trim_title(" ", ctx)
    assert error.context is ctx
    assert error.log_extra()["principal_id"] == 7


# ─── check_nickname_changed ──────────────────────────────────────

def test_same_nickname_is_no_change():
    error = check_nickname_changed("alice", "alice")
    assert error is not None
    assert error.kind == FailureKind.NO_CHANGE
    assert error.message == "no new info to update"


def test_different_nickname_passes():
    assert check_nickname_changed("alice", "alicia") is None


def test_nickname_comparison_is_case_sensitive():
    assert check_nickname_changed("alice", "Alice") is None


# ─── check_note_changed ──────────────────────────────────────────

def test_identical_title_and_body_is_no_change():
    error = check_note_changed("shopping", "milk", "shopping", "milk")
    assert error is not None
    assert error.kind == FailureKind.NO_CHANGE


def test_title_change_alone_passes():
    assert check_note_changed("shopping", "milk", "groceries", "milk") is None


def test_body_change_alone_passes():
    assert check_note_changed("shopping", "milk", "shopping", "milk, eggs") is None


def test_body_whitespace_counts_as_change():
    assert check_note_changed("shopping", "milk", "shopping", "milk ") is None
