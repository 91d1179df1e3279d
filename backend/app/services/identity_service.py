"""
Identity resolution: map a request credential to a user or to nothing.
"""
import logging
from typing import Optional
from fastapi import Request
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.security import decode_access_token
from app.models.user import User
from app.schemas.user import UserResponse

logger = logging.getLogger(__name__)


def extract_credential(request: Request) -> Optional[str]:
    """
    Read the raw credential from a request.

    The auth cookie takes precedence over an ``Authorization: Bearer`` header.
    """
    token = request.cookies.get(settings.AUTH_COOKIE_NAME)
    if token:
        return token

    authorization = request.headers.get("Authorization", "")
    scheme, _, value = authorization.partition(" ")
    if scheme.lower() == "bearer" and value.strip():
        return value.strip()
    return None


def resolve_identity(token: Optional[str], db: Session) -> Optional[UserResponse]:
    """
    Resolve a credential to the public fields of its user.

    Every failure (no token, bad signature, expired token, unknown user,
    storage error) yields None. Callers cannot tell these apart.
    """
    if not token:
        return None

    payload = decode_access_token(token)
    if not payload:
        logger.debug("Rejected credential: token verification failed")
        return None

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        logger.debug("Rejected credential: malformed subject")
        return None

    try:
        user = db.query(User).filter(User.id == user_id).first()
    except Exception as e:
        logger.warning(f"Identity lookup failed for user {user_id}: {e}")
        return None

    if not user:
        logger.debug(f"Rejected credential: user {user_id} no longer exists")
        return None

    return UserResponse.model_validate(user)
