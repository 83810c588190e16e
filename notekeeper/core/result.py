"""Tagged Results — success payload or structured failure, never both.

Invariants:
    - Exactly one of value / error is meaningful (error is None on success)
    - unwrap() is the only place a carried error turns into a raise

Design Decisions:
    - Return values over exceptions inside the managers: every failing path is
      visible in the signature and cannot be silently swallowed
    - Serialization stays outside: the payload is an ORM row or a confirmation
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from notekeeper.core.domain_types import FailureKind, NoteId
from notekeeper.core.errors import NotekeeperError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a manager operation."""
    value: T | None = None
    error: NotekeeperError | None = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: NotekeeperError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> FailureKind | None:
        return self.error.kind if self.error else None

    def unwrap(self) -> T:
        """Return the payload or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value


@dataclass(frozen=True)
class DeleteConfirmation:
    """Success payload of a note soft-delete."""
    note_id: NoteId

    @property
    def message(self) -> str:
        return f"note ID# {self.note_id} deleted!"
