"""Note Manager — profile-scoped CRUD with soft delete.

Invariants:
    - Every operation re-resolves principal -> profile first; no profile is a
      NOT_FOUND_PROFILE failure, distinct from note failures
    - Notes looked up by (note id AND owner_profile_id AND not deleted):
      a foreign note is indistinguishable from a missing one
    - owner_profile_id always taken from the resolved profile, never from input
    - Writes commit once after the full read-validate-write sequence;
      any store failure rolls back and becomes InternalError
    - An empty list is NoNotesFoundError, not an empty success

Design Decisions:
    - Composes ProfileManager for resolution (read-only borrow)
    - Soft delete sets deleted_at; deleted notes never come back to active
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.core.domain_types import MAX_KEY, NoteId, PrincipalId
from notekeeper.core.enforce_fields import check_note_changed, trim_title
from notekeeper.core.errors import (
    ErrorContext, NoNotesFoundError, NoteNotFoundError, ProfileNotFoundError,
)
from notekeeper.core.result import DeleteConfirmation, Result
from notekeeper.infrastructure.database import commit_or_rollback
from notekeeper.models.note import Note
from notekeeper.models.profile import Profile, utc_now
from notekeeper.services.profile_manager import NO_PROFILE_MESSAGE, ProfileManager

logger = logging.getLogger(__name__)


class NoteManager:
    """Owns the Note lifecycle; borrows profile resolution."""

    def __init__(self, db: AsyncSession, profiles: ProfileManager | None = None):
        self.db = db
        self.profiles = profiles or ProfileManager(db)

    async def _resolve_profile(
        self, principal_id: PrincipalId,
    ) -> Result[Profile]:
        profile = await self.profiles.find(principal_id)
        if profile is None:
            logger.info(
                "Note access without profile",
                extra={"principal_id": principal_id},
            )
            return Result.failure(ProfileNotFoundError(
                NO_PROFILE_MESSAGE, ErrorContext(principal_id=principal_id),
            ))
        return Result.success(profile)

    async def _find_owned(self, profile: Profile, note_id: NoteId) -> Note | None:
        # No stored note can carry a key outside the column range
        if not 0 <= note_id <= MAX_KEY:
            return None
        result = await self.db.execute(
            select(Note)
            .where(Note.id == note_id)
            .where(Note.owner_profile_id == profile.id)
            .where(Note.deleted_at.is_(None))
        )
        return result.scalar_one_or_none()

    async def _resolve_note(
        self, principal_id: PrincipalId, note_id: NoteId,
    ) -> Result[Note]:
        resolved = await self._resolve_profile(principal_id)
        if not resolved.ok:
            return Result.failure(resolved.error)
        profile = resolved.value
        note = await self._find_owned(profile, note_id)
        if note is None:
            return Result.failure(NoteNotFoundError(ErrorContext(
                principal_id=principal_id, profile_id=profile.id, note_id=note_id,
            )))
        return Result.success(note)

    async def list_all(self, principal_id: PrincipalId) -> Result[list[Note]]:
        resolved = await self._resolve_profile(principal_id)
        if not resolved.ok:
            return Result.failure(resolved.error)
        profile = resolved.value

        result = await self.db.execute(
            select(Note)
            .where(Note.owner_profile_id == profile.id)
            .where(Note.deleted_at.is_(None))
            .order_by(Note.id)
        )
        notes = list(result.scalars().all())
        if not notes:
            return Result.failure(NoNotesFoundError(ErrorContext(
                principal_id=principal_id, profile_id=profile.id,
            )))
        return Result.success(notes)

    async def get(self, principal_id: PrincipalId, note_id: NoteId) -> Result[Note]:
        return await self._resolve_note(principal_id, note_id)

    async def create(
        self, principal_id: PrincipalId, title: str | None, body: str | None,
    ) -> Result[Note]:
        resolved = await self._resolve_profile(principal_id)
        if not resolved.ok:
            return Result.failure(resolved.error)
        profile = resolved.value
        ctx = ErrorContext(principal_id=principal_id, profile_id=profile.id)

        title, error = trim_title(title, ctx)
        if error:
            return Result.failure(error)

        note = Note(owner_profile_id=profile.id, title=title, body=body or "")
        self.db.add(note)
        error = await commit_or_rollback(self.db, "create_note", ctx)
        if error:
            return Result.failure(error)

        logger.info(
            f"Note {note.id} created",
            extra={"principal_id": principal_id, "profile_id": profile.id, "note_id": note.id},
        )
        return Result.success(note)

    async def update(
        self, principal_id: PrincipalId, note_id: NoteId,
        title: str | None, body: str | None,
    ) -> Result[Note]:
        resolved = await self._resolve_note(principal_id, note_id)
        if not resolved.ok:
            return Result.failure(resolved.error)
        note = resolved.value
        ctx = ErrorContext(
            principal_id=principal_id, profile_id=note.owner_profile_id, note_id=note.id,
        )

        title, error = trim_title(title, ctx)
        if error:
            return Result.failure(error)
        body = body or ""
        error = check_note_changed(note.title, note.body, title, body, ctx)
        if error:
            return Result.failure(error)

        note.title = title
        note.body = body
        note.updated_at = utc_now()
        error = await commit_or_rollback(self.db, "update_note", ctx)
        if error:
            return Result.failure(error)
        return Result.success(note)

    async def delete(
        self, principal_id: PrincipalId, note_id: NoteId,
    ) -> Result[DeleteConfirmation]:
        resolved = await self._resolve_note(principal_id, note_id)
        if not resolved.ok:
            return Result.failure(resolved.error)
        note = resolved.value
        ctx = ErrorContext(
            principal_id=principal_id, profile_id=note.owner_profile_id, note_id=note.id,
        )

        note.deleted_at = utc_now()
        error = await commit_or_rollback(self.db, "delete_note", ctx)
        if error:
            return Result.failure(error)

        logger.info(
            f"Note {note.id} soft-deleted",
            extra={"principal_id": principal_id, "note_id": note.id},
        )
        return Result.success(DeleteConfirmation(NoteId(note.id)))
