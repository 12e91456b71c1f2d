"""Tests for sequential id allocation."""

from concurrent.futures import ThreadPoolExecutor

from batchportal.core.core import Core
from batchportal.core.modules.counter.models import CounterType


class TestCounterService:
    """Tests for CounterService."""

    def test_sequence_starts_at_one(self, config):
        """Test that the first allocated number is 1."""
        counter = Core(config).services.counter
        assert counter.get_current_sequence(CounterType.BATCH_JOB) == 0
        assert counter.get_next_sequence(CounterType.BATCH_JOB) == 1
        assert counter.get_next_sequence(CounterType.BATCH_JOB) == 2
        assert counter.get_current_sequence(CounterType.BATCH_JOB) == 2

    def test_types_are_independent(self, core):
        """Test that user and job sequences do not share numbers."""
        counter = core.services.counter
        # Seeded admin already took user id 1
        assert counter.get_current_sequence(CounterType.USER) == 1
        assert counter.get_next_sequence(CounterType.BATCH_JOB) == 1
        assert counter.get_next_sequence(CounterType.USER) == 2

    def test_concurrent_allocation_is_unique(self, core):
        """Test that ids stay unique when allocated from many threads."""
        counter = core.services.counter
        with ThreadPoolExecutor(max_workers=8) as pool:
            numbers = list(pool.map(lambda _: counter.get_next_sequence(CounterType.BATCH_JOB), range(200)))
        assert sorted(numbers) == list(range(1, 201))
