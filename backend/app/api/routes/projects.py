"""
Project management routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.utils import format_response
from app.db.session import get_db
from app.schemas.user import UserResponse
from app.schemas.project import (
    ProjectCreate, ProjectUpdate, ProjectEnvelope, ProjectDetailEnvelope,
    ProjectListEnvelope, ProjectSummaryEnvelope
)
from app.services import ownership_service
from app.api.dependencies import get_current_user

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=ProjectListEnvelope)
async def list_projects(
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List all projects for current user."""
    projects = ownership_service.list_projects(current_user.id, db)
    return {"projects": projects}


@router.post("", response_model=ProjectEnvelope, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_data: ProjectCreate,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a new project."""
    project = ownership_service.create_project(project_data, current_user.id, db)
    return format_response("project", project, "Project created successfully")


@router.get("/{project_id}", response_model=ProjectDetailEnvelope)
async def get_project(
    project_id: int,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get project details with tasks, materials and notes."""
    project = ownership_service.get_owned_project(project_id, current_user.id, db, with_children=True)
    return {"project": project}


@router.put("/{project_id}", response_model=ProjectEnvelope)
async def update_project(
    project_id: int,
    project_data: ProjectUpdate,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Replace a project's editable fields."""
    project = ownership_service.update_project(project_id, project_data, current_user.id, db)
    return format_response("project", project, "Project updated successfully")


@router.delete("/{project_id}")
async def delete_project(
    project_id: int,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a project together with its tasks, materials and notes."""
    ownership_service.delete_project(project_id, current_user.id, db)
    return {"message": "Project deleted successfully"}


@router.get("/{project_id}/summary", response_model=ProjectSummaryEnvelope)
async def get_project_summary(
    project_id: int,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get task progress and material/note counts for a project."""
    summary = ownership_service.get_project_summary(project_id, current_user.id, db)
    return {"summary": summary}
