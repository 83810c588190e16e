"""ORM Models — SQLAlchemy declarative models for profiles and notes.

Invariants:
    - All models inherit from Base (db/base.py)
    - Profile is the tenant root; every note is scoped by owner_profile_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from notekeeper.models.profile import Profile  # noqa: F401
from notekeeper.models.note import Note  # noqa: F401
