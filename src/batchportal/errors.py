from abc import ABC
from dataclasses import dataclass


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


@dataclass(frozen=True)
class FieldIssue:
    """A single field-level validation failure."""

    field: str  # wire name of the field, e.g. "importSetupId"
    constraint: str  # machine-readable code, e.g. "greater_than_equal"
    message: str


class NotFoundError(UserError):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str = "Document not found") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when user input fails validation."""

    def __init__(self, message: str = "Invalid request data", issues: list[FieldIssue] | None = None) -> None:
        super().__init__(message)
        self.issues = issues or []


class AuthenticationError(UserError):
    """Raised when login credentials are rejected."""

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)


class AuthorizationError(UserError):
    """Raised when a protected operation is called without a usable session token."""


class MissingTokenError(AuthorizationError):
    def __init__(self, message: str = "Access token required") -> None:
        super().__init__(message)


class InvalidTokenError(AuthorizationError):
    """Raised when the token signature is wrong or the token is malformed."""

    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message)


class ExpiredTokenError(InvalidTokenError):
    """Raised when a correctly signed token is past its expiry."""
