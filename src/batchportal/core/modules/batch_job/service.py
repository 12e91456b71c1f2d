import threading

import structlog

from batchportal.config import Config
from batchportal.core.core import Service
from batchportal.core.modules.batch_job.models import BatchJob, BatchJobRequest, BatchJobStatus
from batchportal.core.modules.counter.models import CounterType
from batchportal.errors import NotFoundError

logger = structlog.get_logger(__name__)


class BatchJobService(Service):
    """Append-only ledger of submitted batch jobs.

    Recording a job is all that "starting a batch" means here: jobs stay
    pending and are never updated, executed, or deleted.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config)
        self._lock = threading.Lock()
        self._jobs: dict[int, BatchJob] = {}

    def create_job(self, request: BatchJobRequest) -> BatchJob:
        """Assign the next id, mark the job pending, and store it."""
        with self._lock:
            job_id = self.core.services.counter.get_next_sequence(CounterType.BATCH_JOB)
            job = BatchJob(id=job_id, status=BatchJobStatus.PENDING, **request.model_dump())
            self._jobs[job_id] = job
        logger.info(
            "batch_job_created",
            job_id=job.id,
            import_setup_id=job.import_setup_id,
            old_patients_target=job.old_patients_target,
            hourly_batch_count=job.hourly_batch_count,
        )
        return job

    def get_job(self, job_id: int) -> BatchJob:
        if job_id not in self._jobs:
            raise NotFoundError(f"Batch job '{job_id}' not found")
        return self._jobs[job_id]

    def list_jobs(self) -> list[BatchJob]:
        """Get all jobs in insertion order."""
        return list(self._jobs.values())

    def count_jobs(self) -> int:
        return len(self._jobs)
