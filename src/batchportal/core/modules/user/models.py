from pydantic import BaseModel, Field


class User(BaseModel):
    """User domain model with credentials."""

    id: int
    email: str
    password_hash: str  # bcrypt hash


class UserView(BaseModel):
    """User account information (API representation, never carries password fields)."""

    id: int = Field(..., description="User ID")
    email: str = Field(..., description="Email address")

    @classmethod
    def from_domain(cls, user: User) -> "UserView":
        """Create view model from domain model."""
        return cls(id=user.id, email=user.email)
