from typing import Annotated, Any

from fastapi import APIRouter, Body
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from batchportal.core.modules.batch_job.models import BatchJob
from batchportal.web.deps import AppDep, AuthTokenDep
from batchportal.web.openapi import ErrorResponse

router = APIRouter(tags=["batch"])


class StartBatchResponse(BaseModel):
    """Envelope returned after a batch job is recorded."""

    status: str = Field("success", description="Always 'success'")
    message: str = Field(..., description="Human-readable confirmation")
    batch_job: BatchJob = Field(..., description="Recorded job")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


@router.post(
    "/start-batch",
    summary="Start batch",
    description="Validate batch parameters and record a pending batch job.",
    operation_id="startBatch",
    responses={
        200: {"description": "Batch job recorded"},
        400: {"model": ErrorResponse, "description": "Invalid batch parameters"},
        401: {"model": ErrorResponse, "description": "No token supplied"},
        403: {"model": ErrorResponse, "description": "Invalid or expired token"},
        500: {"model": ErrorResponse, "description": "Unexpected error"},
    },
)
async def start_batch(app: AppDep, auth_token: AuthTokenDep, payload: Annotated[Any, Body()] = None) -> StartBatchResponse:
    batch_job = await app.start_batch(auth_token, payload)
    return StartBatchResponse(message="Batch started successfully!", batch_job=batch_job)


@router.get(
    "/batch-jobs",
    summary="List batch jobs",
    description="List all recorded batch jobs in submission order.",
    operation_id="listBatchJobs",
    responses={
        200: {"description": "Recorded jobs"},
        401: {"model": ErrorResponse, "description": "No token supplied"},
        403: {"model": ErrorResponse, "description": "Invalid or expired token"},
    },
)
async def list_batch_jobs(app: AppDep, auth_token: AuthTokenDep) -> list[BatchJob]:
    return await app.get_batch_jobs(auth_token)
