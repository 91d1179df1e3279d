"""
Material routes, nested under projects for listing and creation.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.utils import format_response
from app.db.session import get_db
from app.models.material import Material
from app.schemas.user import UserResponse
from app.schemas.material import (
    MaterialCreate, MaterialUpdate, MaterialStatusUpdate, MaterialEnvelope,
    MaterialChangeEnvelope, MaterialListEnvelope
)
from app.services import ownership_service
from app.api.dependencies import get_current_user

router = APIRouter(tags=["materials"])


@router.get("/projects/{project_id}/materials", response_model=MaterialListEnvelope)
async def list_materials(
    project_id: int,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the bill of materials for a project, newest first."""
    materials = ownership_service.list_children(Material, project_id, current_user.id, db)
    return {"materials": materials}


@router.post("/projects/{project_id}/materials", response_model=MaterialChangeEnvelope, status_code=status.HTTP_201_CREATED)
async def create_material(
    project_id: int,
    material_data: MaterialCreate,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Add a material to a project."""
    material = ownership_service.create_child(Material, project_id, material_data, current_user.id, db)
    return format_response("material", material, "Material created successfully")


@router.get("/materials/{material_id}", response_model=MaterialEnvelope)
async def get_material(
    material_id: int,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a material by id."""
    material = ownership_service.get_owned_child(Material, material_id, current_user.id, db)
    return {"material": material}


@router.put("/materials/{material_id}", response_model=MaterialChangeEnvelope)
async def update_material(
    material_id: int,
    material_data: MaterialUpdate,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Replace a material's editable fields."""
    material = ownership_service.update_child(Material, material_id, material_data, current_user.id, db)
    return format_response("material", material, "Material updated successfully")


@router.delete("/materials/{material_id}")
async def delete_material(
    material_id: int,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a material."""
    ownership_service.delete_child(Material, material_id, current_user.id, db)
    return {"message": "Material deleted successfully"}


@router.patch("/materials/{material_id}/status", response_model=MaterialChangeEnvelope)
async def update_material_status(
    material_id: int,
    status_data: MaterialStatusUpdate,
    current_user: UserResponse = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Set only a material's ordered/received flags."""
    material = ownership_service.update_child(Material, material_id, status_data, current_user.id, db)
    return format_response("material", material, "Material status updated successfully")
