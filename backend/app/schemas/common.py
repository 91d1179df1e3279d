"""
Annotated field types shared by request schemas.
"""
from datetime import date
from typing import Annotated, Optional
from pydantic import BeforeValidator
from pydantic_core import PydanticCustomError


def _require_text(value):
    """Reject missing or whitespace-only mandatory strings."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("blank", "Value is required")
    if isinstance(value, str):
        return value.strip()
    return value


def _blank_to_none(value):
    """Treat empty form values as absent."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


RequiredText = Annotated[str, BeforeValidator(_require_text)]
OptionalDate = Annotated[Optional[date], BeforeValidator(_blank_to_none)]
