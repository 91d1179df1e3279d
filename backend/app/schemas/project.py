"""
Pydantic schemas for Project entity.
"""
from pydantic import BaseModel, field_validator
from typing import List, Optional
from datetime import date, datetime
from app.schemas.common import RequiredText, OptionalDate
from app.schemas.task import TaskResponse
from app.schemas.material import MaterialResponse
from app.schemas.note import NoteResponse


class ProjectBase(BaseModel):
    """Editable project fields."""
    name: str
    client_name: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    budget: float = 0
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class ProjectCreate(ProjectBase):
    """Schema for project creation."""
    model_config = {"allow_inf_nan": False}

    name: RequiredText
    start_date: OptionalDate = None
    end_date: OptionalDate = None

    @field_validator("budget", mode="before")
    @classmethod
    def default_budget(cls, v):
        """A blank budget means zero."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return 0
        return v


class ProjectUpdate(ProjectCreate):
    """Full replacement of the editable fields; omitted optionals reset to defaults."""
    pass


class ProjectResponse(ProjectBase):
    """Schema for project response."""
    id: int
    user_id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProjectDetailResponse(ProjectResponse):
    """Project with its tasks, materials and notes."""
    tasks: List[TaskResponse] = []
    materials: List[MaterialResponse] = []
    notes: List[NoteResponse] = []


class ProjectSummary(BaseModel):
    """Progress overview of a project."""
    project_id: int
    task_count: int
    completed_tasks: int
    progress: int  # Percentage of completed tasks (0-100)
    days_remaining: Optional[int] = None  # None when no end date is set
    material_count: int
    materials_outstanding: int  # Materials not yet received
    note_count: int


class ProjectEnvelope(BaseModel):
    project: ProjectResponse
    message: str


class ProjectDetailEnvelope(BaseModel):
    project: ProjectDetailResponse


class ProjectListEnvelope(BaseModel):
    projects: List[ProjectResponse]


class ProjectSummaryEnvelope(BaseModel):
    summary: ProjectSummary
