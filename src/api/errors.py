"""
Error reporting - Converts pipeline failures into HTTP responses.

Every failure of the registration pipeline leaves the request through
``report_error`` so the response body has a single shape.
"""

from collections.abc import Mapping

from fastapi.responses import JSONResponse

from src.api.models import ErrorResponse

REGISTRATION_FAILED = "Registration failed"


def report_error(
    code: int,
    message: str | None = None,
    custom_message: Mapping[str, str] | None = None,
) -> JSONResponse:
    """
    Build an error response.

    Args:
        code: HTTP status code, echoed in the body
        message: Single human-readable message
        custom_message: Field error map, reported under ``customMessage``

    Returns:
        JSONResponse with status ``code``
    """
    body = ErrorResponse(
        code=code,
        message=message,
        custom_message=dict(custom_message) if custom_message is not None else None,
    )
    return JSONResponse(
        status_code=code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )
