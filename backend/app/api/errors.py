"""
Exception handlers mapping every failure to an ``{"error": ...}`` body.
"""
import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.utils import format_error

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong"


def describe_validation_error(exc: RequestValidationError) -> str:
    """Turn the first validation error into a field-oriented message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    error = errors[0]
    loc = list(error.get("loc", ()))
    if loc and loc[0] in ("body", "query", "path", "header", "cookie"):
        loc = loc[1:]
    loc = [str(part) for part in loc]
    field = ".".join(loc) if loc else "body"

    if error.get("type") in ("missing", "blank"):
        return f"{field} is required"
    return f"{field}: {error.get('msg', 'invalid value')}"


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=format_error(str(exc.detail)),
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=format_error(describe_validation_error(exc))
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=format_error(GENERIC_ERROR)
    )


def register_exception_handlers(app: FastAPI):
    """Install the JSON error handlers on the application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
