"""Note Routes — profile-scoped note CRUD (/api/v1/notes).

Invariants:
    - No note is public: every route resolves the caller's profile first
    - A foreign note id answers exactly like a missing one (404)
    - DELETE is a soft delete
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.api.dependencies import get_principal_id
from notekeeper.core.domain_types import NoteId, PrincipalId
from notekeeper.infrastructure.database import get_db
from notekeeper.schemas.note import DeleteResponse, NoteInput, NoteResponse
from notekeeper.services.note_manager import NoteManager

router = APIRouter(prefix="/api/v1/notes", tags=["notes"])


@router.get("", response_model=list[NoteResponse])
async def list_notes(
    principal_id: PrincipalId = Depends(get_principal_id),
    db: AsyncSession = Depends(get_db),
):
    """All live notes of the caller, oldest first. No notes is a 404."""
    result = await NoteManager(db).list_all(principal_id)
    return result.unwrap()


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: int,
    principal_id: PrincipalId = Depends(get_principal_id),
    db: AsyncSession = Depends(get_db),
):
    result = await NoteManager(db).get(principal_id, NoteId(note_id))
    return result.unwrap()


@router.post(
    "", response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_note(
    body: NoteInput,
    principal_id: PrincipalId = Depends(get_principal_id),
    db: AsyncSession = Depends(get_db),
):
    result = await NoteManager(db).create(principal_id, body.title, body.body)
    return result.unwrap()


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: int,
    body: NoteInput,
    principal_id: PrincipalId = Depends(get_principal_id),
    db: AsyncSession = Depends(get_db),
):
    result = await NoteManager(db).update(
        principal_id, NoteId(note_id), body.title, body.body,
    )
    return result.unwrap()


@router.delete("/{note_id}", response_model=DeleteResponse)
async def delete_note(
    note_id: int,
    principal_id: PrincipalId = Depends(get_principal_id),
    db: AsyncSession = Depends(get_db),
):
    """Soft-delete one of the caller's notes."""
    result = await NoteManager(db).delete(principal_id, NoteId(note_id))
    return DeleteResponse(message=result.unwrap().message)
