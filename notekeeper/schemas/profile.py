"""Profile Schemas — nickname input and public profile rendering.

Invariants:
    - ProfileInput carries nickname only (principal comes from the auth header)
    - Trimming / emptiness checked in core/enforce_fields.py, not here, so the
      failure kind is the same whatever the entry point

Design Decisions:
    - nickName accepted as an alias for clients of the previous API
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ProfileInput(BaseModel):
    """Profile create/update payload."""
    model_config = ConfigDict(extra="ignore")

    nickname: str = Field(
        "", max_length=255,
        validation_alias=AliasChoices("nickname", "nickName"),
    )


class ProfileResponse(BaseModel):
    """Public-facing profile."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nickname: str
    created_at: datetime
    updated_at: datetime
