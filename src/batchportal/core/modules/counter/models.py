"""Auto-incrementing counters for sequential numbering."""

from enum import StrEnum


class CounterType(StrEnum):
    """Types of entities that use sequential numbering."""

    USER = "user"
    BATCH_JOB = "batch_job"
