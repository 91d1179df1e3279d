"""
User model for authentication and project ownership.
"""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class User(BaseModel):
    """Registered user; owns projects."""
    __tablename__ = "users"

    name = Column(String(100), nullable=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)

    # Relationships
    projects = relationship("Project", back_populates="user", passive_deletes=True)
