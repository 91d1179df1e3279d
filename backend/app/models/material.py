"""
Material model for the bill of materials on a project.
"""
from sqlalchemy import Column, String, Boolean, Float, ForeignKey, Integer
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Material(BaseModel):
    """A material line with ordering/receiving flags."""
    __tablename__ = "materials"

    name = Column(String(200), nullable=False)
    quantity = Column(Float, nullable=False)
    unit = Column(String(50), nullable=True)
    ordered = Column(Boolean, default=False, nullable=False)
    received = Column(Boolean, default=False, nullable=False)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    project = relationship("Project", back_populates="materials")
