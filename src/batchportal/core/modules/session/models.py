"""Session token and login models."""

from datetime import datetime
from typing import NewType

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

AuthToken = NewType("AuthToken", str)


class LoginData(BaseModel):
    """Validated login credentials."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenClaims(BaseModel):
    """Identity claims carried by a verified session token."""

    user_id: int = Field(..., description="ID of the authenticated user")
    email: str = Field(..., description="Email of the authenticated user")
    issued_at: datetime = Field(..., description="When the token was issued")
    expires_at: datetime = Field(..., description="When the token stops being accepted")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
