"""
Project note routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.utils import format_response
from app.db.session import get_db
from app.models.note import Note
from app.schemas.user import UserResponse
from app.schemas.note import NoteCreate, NoteUpdate, NoteEnvelope, NoteChangeEnvelope, NoteListEnvelope
from app.services import ownership_service
from app.api.dependencies import get_current_user

router = APIRouter(tags=["notes"])


@router.get("/projects/{project_id}/notes", response_model=NoteListEnvelope)
async def list_notes(
    project_id: int,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List notes of a project, newest first."""
    notes = ownership_service.list_children(Note, project_id, current_user.id, db)
    return {"notes": notes}


@router.post("/projects/{project_id}/notes", response_model=NoteChangeEnvelope, status_code=status.HTTP_201_CREATED)
async def create_note(
    project_id: int,
    note_data: NoteCreate,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Add a note to a project."""
    note = ownership_service.create_child(Note, project_id, note_data, current_user.id, db)
    return format_response("note", note, "Note created successfully")


@router.get("/notes/{note_id}", response_model=NoteEnvelope)
async def get_note(
    note_id: int,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a note by id."""
    note = ownership_service.get_owned_child(Note, note_id, current_user.id, db)
    return {"note": note}


@router.put("/notes/{note_id}", response_model=NoteChangeEnvelope)
async def update_note(
    note_id: int,
    note_data: NoteUpdate,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Replace a note's editable fields."""
    note = ownership_service.update_child(Note, note_id, note_data, current_user.id, db)
    return format_response("note", note, "Note updated successfully")


@router.delete("/notes/{note_id}")
async def delete_note(
    note_id: int,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a note."""
    ownership_service.delete_child(Note, note_id, current_user.id, db)
    return {"message": "Note deleted successfully"}
