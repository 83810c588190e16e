"""Note ORM — a user-authored record owned by exactly one profile.

Invariants:
    - owner_profile_id is set once at creation and never reassigned
    - body stored verbatim (never trimmed)
    - Lifecycle: active -> deleted (deleted_at set); no transition back

Design Decisions:
    - Soft delete via deleted_at: the row stays for audit/history tooling,
      every read in services/ filters deleted_at IS NULL
    - Index on owner_profile_id: every list/get filters on it
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from notekeeper.db.base import Base
from notekeeper.models.profile import SurrogateKey, utc_now


class Note(Base):
    """Note entity."""
    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(
        SurrogateKey, primary_key=True, autoincrement=True,
    )
    owner_profile_id: Mapped[int] = mapped_column(
        SurrogateKey, ForeignKey("profiles.id"), nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True,
    )
