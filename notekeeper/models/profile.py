"""Profile ORM — one public-facing identity per authenticated principal.

Invariants:
    - principal_id is UNIQUE: at most one profile per principal, enforced by the store
    - nickname is non-empty after trimming (checked by core/enforce_fields.py)
    - Never hard-deleted; deleted_at is a tombstone filtered out of every lookup

Design Decisions:
    - Integer surrogate key (BigInteger on PostgreSQL, INTEGER on SQLite so the
      rowid alias autoincrements in tests)
    - No relationship() to notes: note lookups always filter by owner_profile_id
      explicitly instead of walking a lazy collection
"""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from notekeeper.db.base import Base

SurrogateKey = BigInteger().with_variant(Integer, "sqlite")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Profile(Base):
    """Profile entity — owns zero or more notes."""
    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(
        SurrogateKey, primary_key=True, autoincrement=True,
    )
    principal_id: Mapped[int] = mapped_column(
        BigInteger, nullable=False, unique=True, index=True,
    )
    nickname: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True,
    )
