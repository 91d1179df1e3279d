"""
Pydantic schemas for Task entity.
"""
from pydantic import BaseModel, field_validator
from typing import List, Optional
from datetime import date, datetime
from app.models.task import TaskStatus
from app.schemas.common import RequiredText, OptionalDate


class TaskBase(BaseModel):
    """Editable task fields."""
    title: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.NOT_STARTED
    due_date: Optional[date] = None
    assigned_to: Optional[str] = None
    notes: Optional[str] = None


class TaskCreate(TaskBase):
    """Schema for task creation."""
    title: RequiredText
    due_date: OptionalDate = None

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, v):
        if v is None or v == "":
            return TaskStatus.NOT_STARTED
        return v


class TaskUpdate(TaskCreate):
    """Full replacement of the editable fields."""
    pass


class TaskStatusUpdate(BaseModel):
    """Status change only."""
    status: TaskStatus


class TaskResponse(TaskBase):
    """Schema for task response."""
    id: int
    project_id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TaskEnvelope(BaseModel):
    task: TaskResponse


class TaskChangeEnvelope(TaskEnvelope):
    message: str


class TaskListEnvelope(BaseModel):
    tasks: List[TaskResponse]
