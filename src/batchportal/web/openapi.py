from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field

PUBLIC_ENDPOINTS = {
    ("POST", "/api/login"),
    ("GET", "/health"),
}


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="Batch Portal API",
            version="0.1.0",
            summary="Admin portal for submitting batch-processing job requests",
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "BearerAuth": {
                "type": "http",
                "scheme": "bearer",
                "bearerFormat": "JWT",
                "description": "Session token returned by /api/login",
            },
        }

        # Apply security globally, then clear it on public endpoints
        openapi_schema["security"] = [{"BearerAuth": []}]

        for path, path_item in openapi_schema["paths"].items():
            for method, operation in path_item.items():
                if (method.upper(), path) in PUBLIC_ENDPOINTS:
                    operation["security"] = []

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class FieldIssueResponse(BaseModel):
    field: str = Field(..., description="Name of the offending field")
    constraint: str = Field(..., description="Machine-readable constraint code")
    message: str = Field(..., description="Human-readable explanation")


class ErrorResponse(BaseModel):
    """Standard error response format."""

    status: str = Field("error", description="Always 'error'")
    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")
    errors: list[FieldIssueResponse] | None = Field(None, description="Field-level detail for validation errors")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"status": "error", "message": "Invalid email or password", "type": "authentication_error"},
                {"status": "error", "message": "Access token required", "type": "missing_token"},
                {"status": "error", "message": "Invalid or expired token", "type": "invalid_token"},
            ]
        }
    }
