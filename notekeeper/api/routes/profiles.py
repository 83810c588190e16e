"""Profile Routes — the caller's own profile (GET/POST/PUT /api/v1/users).

Invariants:
    - The principal always comes from get_principal_id, never from the body
    - No delete endpoint: profiles are never removed through this API
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.api.dependencies import get_principal_id
from notekeeper.core.domain_types import PrincipalId
from notekeeper.infrastructure.database import get_db
from notekeeper.schemas.profile import ProfileInput, ProfileResponse
from notekeeper.services.profile_manager import ProfileManager

router = APIRouter(prefix="/api/v1/users", tags=["profile"])


@router.get("", response_model=ProfileResponse)
async def get_profile(
    principal_id: PrincipalId = Depends(get_principal_id),
    db: AsyncSession = Depends(get_db),
):
    """Profile of the logged-in principal."""
    result = await ProfileManager(db).resolve(principal_id)
    return result.unwrap()


@router.post(
    "", response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_profile(
    body: ProfileInput,
    principal_id: PrincipalId = Depends(get_principal_id),
    db: AsyncSession = Depends(get_db),
):
    """Create the principal's profile. A second attempt is a conflict."""
    result = await ProfileManager(db).create(principal_id, body.nickname)
    return result.unwrap()


@router.put("", response_model=ProfileResponse)
async def update_profile(
    body: ProfileInput,
    principal_id: PrincipalId = Depends(get_principal_id),
    db: AsyncSession = Depends(get_db),
):
    """Change the nickname. Same nickname is rejected as no-change."""
    result = await ProfileManager(db).update(principal_id, body.nickname)
    return result.unwrap()
