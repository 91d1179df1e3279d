"""
Pydantic schemas for Material entity.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from app.schemas.common import RequiredText


class MaterialBase(BaseModel):
    """Editable material fields."""
    name: str
    quantity: float
    unit: Optional[str] = None
    ordered: bool = False
    received: bool = False


class MaterialCreate(MaterialBase):
    """Schema for material creation. Quantity must be positive."""
    model_config = {"allow_inf_nan": False}

    name: RequiredText
    quantity: float = Field(..., gt=0)


class MaterialUpdate(MaterialCreate):
    """Full replacement of the editable fields."""
    pass


class MaterialStatusUpdate(BaseModel):
    """Ordered/received flags only."""
    ordered: bool = False
    received: bool = False


class MaterialResponse(MaterialBase):
    """Schema for material response."""
    id: int
    project_id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class MaterialEnvelope(BaseModel):
    material: MaterialResponse


class MaterialChangeEnvelope(MaterialEnvelope):
    message: str


class MaterialListEnvelope(BaseModel):
    materials: List[MaterialResponse]
