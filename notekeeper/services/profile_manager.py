"""Profile Manager — resolve, create and update the single profile of a principal.

Invariants:
    - At most one live profile per principal_id (pre-check + UNIQUE constraint)
    - Create is never idempotent: a second attempt is a Conflict, not a merge
    - Update with an unchanged nickname is NoChange, not a silent success
    - Only nickname is ever applied from input; principal_id comes from the caller

Design Decisions:
    - Racing creates that both pass the pre-check collapse into Conflict when
      the loser's commit trips the UNIQUE constraint
    - Failures returned as Result, not raised: the API layer decides rendering
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.core.domain_types import PrincipalId
from notekeeper.core.enforce_fields import check_nickname_changed, trim_nickname
from notekeeper.core.errors import (
    ErrorContext, ProfileConflictError, ProfileNotFoundError,
)
from notekeeper.core.result import Result
from notekeeper.infrastructure.database import commit_or_rollback
from notekeeper.models.profile import Profile, utc_now

logger = logging.getLogger(__name__)

NO_PROFILE_MESSAGE = "no user profile found"


class ProfileManager:
    """Owns the Profile lifecycle."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find(self, principal_id: PrincipalId) -> Profile | None:
        """Live profile of the principal, or None. Pure read."""
        result = await self.db.execute(
            select(Profile)
            .where(Profile.principal_id == principal_id)
            .where(Profile.deleted_at.is_(None))
        )
        return result.scalar_one_or_none()

    async def resolve(
        self, principal_id: PrincipalId, message: str = "user profile not found",
    ) -> Result[Profile]:
        profile = await self.find(principal_id)
        if profile is None:
            return Result.failure(ProfileNotFoundError(
                message, ErrorContext(principal_id=principal_id),
            ))
        return Result.success(profile)

    async def create(
        self, principal_id: PrincipalId, nickname: str | None,
    ) -> Result[Profile]:
        ctx = ErrorContext(principal_id=principal_id)
        nickname, error = trim_nickname(nickname, ctx)
        if error:
            return Result.failure(error)

        if await self.find(principal_id) is not None:
            logger.info(
                "Duplicate profile creation rejected",
                extra={"principal_id": principal_id},
            )
            return Result.failure(ProfileConflictError(ctx))

        profile = Profile(principal_id=principal_id, nickname=nickname)
        self.db.add(profile)
        error = await commit_or_rollback(
            self.db, "create_profile", ctx,
            on_integrity=ProfileConflictError(ctx),
        )
        if error:
            return Result.failure(error)

        logger.info(
            f"Profile {profile.id} created",
            extra={"principal_id": principal_id, "profile_id": profile.id},
        )
        return Result.success(profile)

    async def update(
        self, principal_id: PrincipalId, nickname: str | None,
    ) -> Result[Profile]:
        resolved = await self.resolve(principal_id, NO_PROFILE_MESSAGE)
        if not resolved.ok:
            return Result.failure(resolved.error)
        profile = resolved.value
        ctx = ErrorContext(principal_id=principal_id, profile_id=profile.id)

        nickname, error = trim_nickname(nickname, ctx)
        if error:
            return Result.failure(error)
        error = check_nickname_changed(profile.nickname, nickname, ctx)
        if error:
            return Result.failure(error)

        profile.nickname = nickname
        profile.updated_at = utc_now()
        error = await commit_or_rollback(self.db, "update_profile", ctx)
        if error:
            return Result.failure(error)
        return Result.success(profile)
