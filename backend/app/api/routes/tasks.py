"""
Task routes. Listing and creation are nested under the owning project.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.utils import format_response
from app.db.session import get_db
from app.models.task import Task
from app.schemas.user import UserResponse
from app.schemas.task import TaskCreate, TaskUpdate, TaskStatusUpdate, TaskEnvelope, TaskChangeEnvelope, TaskListEnvelope
from app.services import ownership_service
from app.api.dependencies import get_current_user

router = APIRouter(tags=["tasks"])


@router.get("/projects/{project_id}/tasks", response_model=TaskListEnvelope)
async def list_tasks(
    project_id: int,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List tasks of a project, newest first."""
    tasks = ownership_service.list_children(Task, project_id, current_user.id, db)
    return {"tasks": tasks}


@router.post("/projects/{project_id}/tasks", response_model=TaskChangeEnvelope, status_code=status.HTTP_201_CREATED)
async def create_task(
    project_id: int,
    task_data: TaskCreate,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Add a task to a project."""
    task = ownership_service.create_child(Task, project_id, task_data, current_user.id, db)
    return format_response("task", task, "Task created successfully")


@router.get("/tasks/{task_id}", response_model=TaskEnvelope)
async def get_task(
    task_id: int,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a task by id."""
    task = ownership_service.get_owned_child(Task, task_id, current_user.id, db)
    return {"task": task}


@router.put("/tasks/{task_id}", response_model=TaskChangeEnvelope)
async def update_task(
    task_id: int,
    task_data: TaskUpdate,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Replace a task's editable fields."""
    task = ownership_service.update_child(Task, task_id, task_data, current_user.id, db)
    return format_response("task", task, "Task updated successfully")


@router.delete("/tasks/{task_id}")
async def delete_task(
    task_id: int,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a task."""
    ownership_service.delete_child(Task, task_id, current_user.id, db)
    return {"message": "Task deleted successfully"}


@router.patch("/tasks/{task_id}/status", response_model=TaskChangeEnvelope)
async def update_task_status(
    task_id: int,
    status_data: TaskStatusUpdate,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Change only a task's status."""
    task = ownership_service.update_child(Task, task_id, status_data, current_user.id, db)
    return format_response("task", task, "Task status updated successfully")
