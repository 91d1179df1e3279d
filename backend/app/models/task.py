"""
Task model for work items on a project.
"""
from sqlalchemy import Column, String, Date, Enum as SQLEnum, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from app.db.base import BaseModel
import enum


class TaskStatus(str, enum.Enum):
    """Task status enumeration."""
    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    DELAYED = "delayed"


class Task(BaseModel):
    """A unit of work belonging to a project."""
    __tablename__ = "tasks"

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(
        SQLEnum(TaskStatus, values_callable=lambda e: [m.value for m in e]),
        default=TaskStatus.NOT_STARTED,
        nullable=False,
    )
    due_date = Column(Date, nullable=True)
    assigned_to = Column(String(100), nullable=True)
    notes = Column(Text, nullable=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    project = relationship("Project", back_populates="tasks")
