"""Tests for the batch job ledger."""

import pytest

from batchportal.core.core import Core
from batchportal.core.modules.batch_job.models import BatchJobRequest, BatchJobStatus
from batchportal.errors import NotFoundError


def make_request(**overrides):
    values = {"old_patients_target": 10, "import_setup_id": 5, "hourly_batch_count": 60}
    values.update(overrides)
    return BatchJobRequest(**values)


class TestBatchJobService:
    """Tests for BatchJobService."""

    def test_create_job_is_pending_with_sequential_id(self, core):
        """Test that jobs start pending and ids increase."""
        first = core.services.batch_job.create_job(make_request())
        second = core.services.batch_job.create_job(make_request(import_setup_id=7))
        assert first.id == 1
        assert second.id == 2
        assert first.status == BatchJobStatus.PENDING
        assert first.created_at <= second.created_at
        assert second.import_setup_id == 7

    def test_list_jobs_in_insertion_order(self, core):
        """Test that listing returns jobs in the order they were created."""
        for setup_id in (3, 1, 2):
            core.services.batch_job.create_job(make_request(import_setup_id=setup_id))
        jobs = core.services.batch_job.list_jobs()
        assert [job.import_setup_id for job in jobs] == [3, 1, 2]
        assert [job.id for job in jobs] == [1, 2, 3]
        assert core.services.batch_job.count_jobs() == 3

    def test_get_job(self, core):
        """Test fetching a single job by id."""
        job = core.services.batch_job.create_job(make_request())
        assert core.services.batch_job.get_job(job.id) == job
        with pytest.raises(NotFoundError):
            core.services.batch_job.get_job(42)

    def test_ledgers_are_isolated_per_core(self, core, config):
        """Test that a fresh core starts with an empty ledger."""
        core.services.batch_job.create_job(make_request())
        assert Core(config).services.batch_job.list_jobs() == []

    def test_serializes_with_wire_names(self, core):
        """Test that the recorded job dumps with camelCase keys."""
        job = core.services.batch_job.create_job(make_request())
        data = job.model_dump(by_alias=True, mode="json")
        assert data["status"] == "pending"
        assert data["importSetupId"] == 5
        assert "createdAt" in data
