"""
Pydantic schemas for Note entity.
"""
from pydantic import BaseModel, field_validator
from typing import List, Optional
from datetime import datetime
from app.schemas.common import RequiredText


class NoteBase(BaseModel):
    """Editable note fields."""
    title: str
    content: str
    category: str = "general"


class NoteCreate(NoteBase):
    """Schema for note creation."""
    title: RequiredText
    content: RequiredText

    @field_validator("category", mode="before")
    @classmethod
    def default_category(cls, v):
        """Blank category falls back to 'general'."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return "general"
        return v


class NoteUpdate(NoteCreate):
    """Full replacement of the editable fields."""
    pass


class NoteResponse(NoteBase):
    """Schema for note response."""
    id: int
    project_id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class NoteEnvelope(BaseModel):
    note: NoteResponse


class NoteChangeEnvelope(NoteEnvelope):
    message: str


class NoteListEnvelope(BaseModel):
    notes: List[NoteResponse]
