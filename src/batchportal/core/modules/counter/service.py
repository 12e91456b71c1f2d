import threading

from batchportal.config import Config
from batchportal.core.core import Service
from batchportal.core.modules.counter.models import CounterType


class CounterService(Service):
    """Service for managing auto-incrementing counters per entity type.

    Each sequence starts at 1 and is never rewound, so identifiers are
    strictly increasing and never reused for the lifetime of the process.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config)
        self._lock = threading.Lock()
        self._sequences: dict[CounterType, int] = {}

    def get_next_sequence(self, counter_type: CounterType) -> int:
        """Atomically increment and return the next sequence number for a type."""
        with self._lock:
            seq = self._sequences.get(counter_type, 0) + 1
            self._sequences[counter_type] = seq
            return seq

    def get_current_sequence(self, counter_type: CounterType) -> int:
        """Get the current sequence number without incrementing."""
        with self._lock:
            return self._sequences.get(counter_type, 0)
