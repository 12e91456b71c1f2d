from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from batchportal.core.modules.batch_job.models import BatchJobRequest
from batchportal.errors import FieldIssue, ValidationError

GENERIC_MESSAGE = "Invalid input data. Please check your values and try again."
IMPORT_SETUP_ID_MESSAGE = "Import Setup ID must be a positive integer greater than 0"


class BatchJobPayload(BaseModel):
    """Schema-level constraints: numeric types and ranges only."""

    old_patients_target: float = Field(..., ge=0, le=100)
    import_setup_id: float = Field(..., ge=1)
    hourly_batch_count: float = Field(..., ge=1, le=100)

    model_config = ConfigDict(alias_generator=to_camel, strict=True, allow_inf_nan=False)


def _issue_message(field: str, error_type: str, ctx: dict[str, Any], default: str) -> str:
    if field == "importSetupId" and error_type == "greater_than_equal":
        return "Must be a positive integer greater than 0"
    if error_type == "greater_than_equal":
        return f"Must be at least {ctx['ge']}"
    if error_type == "less_than_equal":
        return f"Must be at most {ctx['le']}"
    if error_type == "missing":
        return "This field is required"
    if error_type in ("float_type", "float_parsing"):
        return "Must be a number"
    if error_type == "finite_number":
        return "Must be a finite number"
    return default


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def validate_batch_job_request(payload: Any) -> BatchJobRequest:
    """Validate a batch-job payload and return the normalized request.

    The schema only bounds ``importSetupId`` numerically, so its integrality
    is checked again explicitly afterwards.

    Raises:
        ValidationError: with one FieldIssue per failing field
    """
    if not isinstance(payload, dict):
        raise ValidationError(GENERIC_MESSAGE, [FieldIssue("body", "object_type", "Request body must be an object")])

    issues: list[FieldIssue] = []
    parsed: BatchJobPayload | None = None
    try:
        parsed = BatchJobPayload.model_validate(payload)
    except pydantic.ValidationError as e:
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "body"
            message = _issue_message(field, error["type"], error.get("ctx") or {}, error["msg"])
            issues.append(FieldIssue(field, error["type"], message))

    import_setup_id = payload.get("importSetupId")
    flagged = {issue.field for issue in issues}
    if "importSetupId" not in flagged and _is_number(import_setup_id):
        is_integral = isinstance(import_setup_id, int) or import_setup_id.is_integer()
        if not is_integral or import_setup_id <= 0:
            issues.append(FieldIssue("importSetupId", "integer", IMPORT_SETUP_ID_MESSAGE))

    if issues or parsed is None:
        only_import_setup = all(issue.field == "importSetupId" for issue in issues)
        raise ValidationError(IMPORT_SETUP_ID_MESSAGE if only_import_setup else GENERIC_MESSAGE, issues)

    return BatchJobRequest(
        old_patients_target=parsed.old_patients_target,
        import_setup_id=int(parsed.import_setup_id),
        hourly_batch_count=parsed.hourly_batch_count,
    )
