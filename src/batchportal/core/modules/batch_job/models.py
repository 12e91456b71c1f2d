from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from batchportal.utils import now


class BatchJobStatus(StrEnum):
    """Lifecycle state of a recorded job. Jobs are never executed, so only PENDING exists."""

    PENDING = "pending"


class BatchJobRequest(BaseModel):
    """Validated parameters for a batch-processing job."""

    old_patients_target: float = Field(..., ge=0, le=100, description="Target share of old patients, 0-100")
    import_setup_id: int = Field(..., ge=1, description="Import setup to run against")
    hourly_batch_count: float = Field(..., ge=1, le=100, description="Batches per hour, 1-100")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BatchJob(BatchJobRequest):
    """Recorded batch job descriptor."""

    id: int = Field(..., description="Sequential job ID")
    status: BatchJobStatus = BatchJobStatus.PENDING
    created_at: datetime = Field(default_factory=now)
