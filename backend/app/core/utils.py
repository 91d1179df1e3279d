"""
Utility functions for the application.
"""
from typing import Any, Dict, Optional


def format_response(key: str, data: Any, message: Optional[str] = None) -> Dict[str, Any]:
    """Wrap a payload under a named key, with an optional message."""
    response = {key: data}
    if message:
        response["message"] = message
    return response


def format_error(message: str) -> Dict[str, str]:
    """Format error response."""
    return {"error": message}
