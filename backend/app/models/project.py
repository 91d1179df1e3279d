"""
Project model, the root of every ownership check.
"""
from sqlalchemy import Column, String, Date, Float, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Project(BaseModel):
    """A job owned by exactly one user."""
    __tablename__ = "projects"

    name = Column(String(200), nullable=False)
    client_name = Column(String(200), nullable=True)
    location = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    budget = Column(Float, nullable=False, default=0)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Children are removed by the database cascade, not by the ORM
    user = relationship("User", back_populates="projects")
    tasks = relationship("Task", back_populates="project", passive_deletes=True,
                         order_by="[Task.created_at.desc(), Task.id.desc()]")
    materials = relationship("Material", back_populates="project", passive_deletes=True,
                             order_by="[Material.created_at.desc(), Material.id.desc()]")
    notes = relationship("Note", back_populates="project", passive_deletes=True,
                         order_by="[Note.created_at.desc(), Note.id.desc()]")
