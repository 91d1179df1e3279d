"""
Ownership-scoped CRUD for projects and their tasks, materials and notes.

A project belongs to a user directly; tasks, materials and notes belong to a
user through their project. Every lookup filters on the owner in the same query
as the id, so a record that exists but belongs to someone else is reported
exactly like a record that does not exist.
"""
import logging
from typing import List, Type, Union
from fastapi import HTTPException, status
from pydantic import BaseModel as Schema
from sqlalchemy.orm import Session, selectinload
from app.models.project import Project
from app.models.task import Task, TaskStatus
from app.models.material import Material
from app.models.note import Note
from app.schemas.project import ProjectCreate, ProjectUpdate, ProjectSummary
from app.services.estimator_service import summarize_progress

logger = logging.getLogger(__name__)

ChildModel = Union[Task, Material, Note]

ENTITY_LABELS = {
    Project: "Project",
    Task: "Task",
    Material: "Material",
    Note: "Note",
}


def _not_found(model) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{ENTITY_LABELS[model]} not found"
    )


def _apply(entity, data: Schema):
    """Replace every editable field with the submitted values."""
    for field, value in data.model_dump().items():
        setattr(entity, field, value)


# Projects

def get_owned_project(project_id: int, user_id: int, db: Session, with_children: bool = False) -> Project:
    """Load a project owned by the user or raise 404."""
    query = db.query(Project)
    if with_children:
        query = query.options(
            selectinload(Project.tasks),
            selectinload(Project.materials),
            selectinload(Project.notes)
        )
    project = query.filter(
        Project.id == project_id,
        Project.user_id == user_id
    ).first()

    if not project:
        raise _not_found(Project)
    return project


def list_projects(user_id: int, db: Session) -> List[Project]:
    """List the user's projects, most recently updated first."""
    return db.query(Project).filter(
        Project.user_id == user_id
    ).order_by(Project.updated_at.desc(), Project.id.desc()).all()


def create_project(data: ProjectCreate, user_id: int, db: Session) -> Project:
    """Create a project owned by the user."""
    project = Project(user_id=user_id, **data.model_dump())
    db.add(project)
    db.commit()
    db.refresh(project)
    logger.info(f"User {user_id} created project {project.id}")
    return project


def update_project(project_id: int, data: ProjectUpdate, user_id: int, db: Session) -> Project:
    """Replace the editable fields of an owned project. Ownership never changes."""
    project = get_owned_project(project_id, user_id, db)
    _apply(project, data)
    db.commit()
    db.refresh(project)
    return project


def delete_project(project_id: int, user_id: int, db: Session):
    """Delete an owned project. Its children go with it via ON DELETE CASCADE."""
    project = get_owned_project(project_id, user_id, db)
    db.delete(project)
    db.commit()
    logger.info(f"User {user_id} deleted project {project_id}")


def get_project_summary(project_id: int, user_id: int, db: Session) -> ProjectSummary:
    """Progress and counts for an owned project."""
    project = get_owned_project(project_id, user_id, db, with_children=True)
    progress, days_remaining = summarize_progress(
        (task.status for task in project.tasks),
        project.end_date
    )
    return ProjectSummary(
        project_id=project.id,
        task_count=len(project.tasks),
        completed_tasks=sum(1 for t in project.tasks if t.status == TaskStatus.COMPLETED),
        progress=progress,
        days_remaining=days_remaining,
        material_count=len(project.materials),
        materials_outstanding=sum(1 for m in project.materials if not m.received),
        note_count=len(project.notes),
    )


# Tasks, materials and notes

def get_owned_child(model: Type[ChildModel], child_id: int, user_id: int, db: Session) -> ChildModel:
    """Load a child record whose project is owned by the user, or raise 404."""
    child = db.query(model).join(
        Project, model.project_id == Project.id
    ).filter(
        model.id == child_id,
        Project.user_id == user_id
    ).first()

    if not child:
        raise _not_found(model)
    return child


def list_children(model: Type[ChildModel], project_id: int, user_id: int, db: Session) -> List[ChildModel]:
    """List a project's children, newest first. The project must be owned."""
    get_owned_project(project_id, user_id, db)
    return db.query(model).filter(
        model.project_id == project_id
    ).order_by(model.created_at.desc(), model.id.desc()).all()


def create_child(model: Type[ChildModel], project_id: int, data: Schema, user_id: int, db: Session) -> ChildModel:
    """Create a child record under an owned project."""
    get_owned_project(project_id, user_id, db)
    child = model(project_id=project_id, **data.model_dump())
    db.add(child)
    db.commit()
    db.refresh(child)
    return child


def update_child(model: Type[ChildModel], child_id: int, data: Schema, user_id: int, db: Session) -> ChildModel:
    """Write the submitted fields onto an owned child. Its project never changes."""
    child = get_owned_child(model, child_id, user_id, db)
    _apply(child, data)
    db.commit()
    db.refresh(child)
    return child


def delete_child(model: Type[ChildModel], child_id: int, user_id: int, db: Session):
    """Delete an owned child record."""
    child = get_owned_child(model, child_id, user_id, db)
    db.delete(child)
    db.commit()
