"""
Shared route dependencies.
"""
from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.schemas.user import UserResponse
from app.services.identity_service import extract_credential, resolve_identity


def get_optional_user(request: Request, db: Session = Depends(get_db)) -> Optional[UserResponse]:
    """Resolved identity of the caller, or None."""
    return resolve_identity(extract_credential(request), db)


def get_current_user(user: Optional[UserResponse] = Depends(get_optional_user)) -> UserResponse:
    """Resolved identity of the caller; 401 when there is none."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized"
        )
    return user
