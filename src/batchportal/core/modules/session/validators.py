from typing import Any

import pydantic

from batchportal.core.modules.session.models import LoginData
from batchportal.errors import FieldIssue, ValidationError

LOGIN_MESSAGES = {
    ("email", "missing"): "Email is required",
    ("password", "missing"): "Password is required",
    ("password", "string_too_short"): "Password is required",
    ("password", "string_type"): "Password must be a string",
}


def validate_login(payload: Any) -> LoginData:
    """Validate a login payload.

    Requirements:
    - ``email`` is a syntactically valid email address
    - ``password`` is a non-empty string

    Raises:
        ValidationError: listing every field that failed
    """
    if not isinstance(payload, dict):
        raise ValidationError("Invalid request data", [FieldIssue("body", "object_type", "Request body must be an object")])

    try:
        return LoginData.model_validate(payload)
    except pydantic.ValidationError as e:
        issues = []
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "body"
            if field == "email" and error["type"] != "missing":
                issues.append(FieldIssue(field, "email", "Please enter a valid email address"))
            else:
                issues.append(FieldIssue(field, error["type"], LOGIN_MESSAGES.get((field, error["type"]), error["msg"])))
        raise ValidationError("Invalid request data", issues) from e
