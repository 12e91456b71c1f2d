from typing import Annotated, Any

from fastapi import APIRouter, Body
from pydantic import BaseModel, Field

from batchportal.core.modules.session.models import TokenClaims
from batchportal.core.modules.user.models import UserView
from batchportal.web.deps import AppDep, AuthTokenDep
from batchportal.web.openapi import ErrorResponse

router = APIRouter(tags=["auth"])


class LoginResponse(BaseModel):
    """Authentication response."""

    token: str = Field(..., description="Session token for subsequent requests")
    user: UserView = Field(..., description="Authenticated user")


class VerifyResponse(BaseModel):
    """Session check response."""

    user: TokenClaims = Field(..., description="Identity claims decoded from the token")


@router.post(
    "/login",
    summary="Authenticate user",
    description="Authenticate with email and password to receive a session token valid for 24 hours.",
    operation_id="login",
    responses={
        200: {"description": "Successfully authenticated"},
        400: {"model": ErrorResponse, "description": "Malformed request"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(app: AppDep, payload: Annotated[Any, Body()]) -> LoginResponse:
    # Body is validated by the app so errors carry field-level detail
    token, user = await app.login(payload)
    return LoginResponse(token=token, user=user)


@router.get(
    "/verify",
    summary="Verify session",
    description="Check whether a stored session token is still valid and return its identity claims.",
    operation_id="verifySession",
    responses={
        200: {"description": "Token is valid"},
        401: {"model": ErrorResponse, "description": "No token supplied"},
        403: {"model": ErrorResponse, "description": "Invalid or expired token"},
    },
)
async def verify(app: AppDep, auth_token: AuthTokenDep) -> VerifyResponse:
    claims = await app.verify_session(auth_token)
    return VerifyResponse(user=claims)
