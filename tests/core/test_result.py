"""Tagged Results — tests for Result and DeleteConfirmation.

Tests cover:
    - success/failure constructors and the ok/kind accessors
    - unwrap returns the payload or raises the carried error
    - delete confirmation message
"""

import pytest

from notekeeper.core.domain_types import FailureKind, NoteId
from notekeeper.core.errors import NoteNotFoundError, ProfileConflictError
from notekeeper.core.result import DeleteConfirmation, Result


def test_success_is_ok_without_kind():
    result = Result.success("payload")
    assert result.ok
    assert result.kind is None
    assert result.unwrap() == "payload"


def test_success_may_carry_empty_payload():
    result = Result.success([])
    assert result.ok
    assert result.unwrap() == []


def test_failure_exposes_kind():
    result = Result.failure(NoteNotFoundError())
    assert not result.ok
    assert result.kind == FailureKind.NOT_FOUND_NOTE
    assert result.value is None


def test_unwrap_raises_carried_error():
    error = ProfileConflictError()
    result = Result.failure(error)
    with pytest.raises(ProfileConflictError) as exc_info:
        result.unwrap()
    assert exc_info.value is error


def test_delete_confirmation_message():
    confirmation = DeleteConfirmation(NoteId(42))
    assert confirmation.message == "note ID# 42 deleted!"
