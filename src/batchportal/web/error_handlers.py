import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse, Response

from batchportal.errors import (
    AuthenticationError,
    AuthorizationError,
    InvalidTokenError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def create_json_error_response(
    status_code: int, message: str, error_type: str | None = None, errors: list[dict[str, str]] | None = None
) -> JSONResponse:
    """Create JSON error response with optional type for machine parsing."""
    content: dict[str, Any] = {"status": "error", "message": message}
    if error_type:
        content["type"] = error_type
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses with appropriate status codes."""
    errors = None
    if isinstance(exc, AuthenticationError):
        status_code = 401
        error_type = "authentication_error"
    elif isinstance(exc, InvalidTokenError):
        status_code = 403
        error_type = "invalid_token"
    elif isinstance(exc, AuthorizationError):
        status_code = 401
        error_type = "missing_token"
    elif isinstance(exc, NotFoundError):
        status_code = 404
        error_type = "not_found"
    elif isinstance(exc, ValidationError):
        status_code = 400
        error_type = "validation_error"
        errors = [
            {"field": issue.field, "constraint": issue.constraint, "message": issue.message} for issue in exc.issues
        ]
    else:
        status_code = 400
        error_type = "bad_request"

    return create_json_error_response(status_code=status_code, message=str(exc), error_type=error_type, errors=errors)


async def request_validation_error_handler(_: Request, exc: Exception) -> Response:
    """Handle bodies FastAPI could not parse (malformed JSON, non-object payload)."""
    logger.debug("Rejected request body: %s", exc)
    return create_json_error_response(status_code=400, message="Invalid request data", error_type="validation_error")


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("Unexpected error: %s", exc)
    return create_json_error_response(
        status_code=500, message="An unexpected error occurred.", error_type="internal_server_error"
    )
