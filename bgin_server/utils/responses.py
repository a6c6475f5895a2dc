"""Response utility functions."""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse


def error_response(message: str, status_code: int = status.HTTP_400_BAD_REQUEST, **extra: Any) -> JSONResponse:
    """Create standardized error response."""
    return JSONResponse(
        content={"success": False, "error": message, **extra},
        status_code=status_code
    )


def missing_fields_response(missing: list) -> JSONResponse:
    """400 naming every absent required field."""
    return error_response(f"Missing required fields: {', '.join(missing)}", missing=missing)


def failure_response(message: str, exc: Exception, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> JSONResponse:
    """Error response echoing the underlying exception message as ``details``."""
    return error_response(message, status_code=status_code, details=str(exc))
