"""Models package - Import all models for SQLAlchemy registration."""
from app.models.user import User
from app.models.project import Project
from app.models.task import Task, TaskStatus
from app.models.material import Material
from app.models.note import Note

__all__ = [
    "User",
    "Project",
    "Task",
    "TaskStatus",
    "Material",
    "Note",
]
