"""
Sample and statistics data models.

This module contains the value types passed between the runtime stats reader,
the procfs parsers, and the sample sources.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Sample:
    """
    A single measurement, combined with a metric name by the registry.

    Attributes:
        value: The measured value.
        suffix: Appended to the owning metric's name (e.g. "open_fds").
    """

    value: float
    suffix: str


@dataclass(frozen=True)
class GCStats:
    """Memory counters reported by the runtime, all in bytes."""

    heap_size_bytes: float
    free_bytes: float
    total_bytes: float
    unmapped_bytes: float
    bytes_since_gc: float


@dataclass(frozen=True)
class ProcessTimes:
    """CPU time consumed by the process, in seconds."""

    user_seconds: float
    system_seconds: float

    @property
    def total_seconds(self) -> float:
        return self.user_seconds + self.system_seconds


@dataclass(frozen=True)
class ProcStatFields:
    """
    Typed fields extracted from ``/proc/<pid>/stat``.

    Attributes:
        start_time_jiffies: Process start time after boot, in clock ticks.
        virtual_memory_bytes: Virtual memory size (VSZ) in bytes.
        resident_pages: Resident set size (RSS) in pages.
    """

    start_time_jiffies: float
    virtual_memory_bytes: float
    resident_pages: float


@dataclass(frozen=True)
class ProcFSFacts:
    """Facts derived from procfs for one collection."""

    open_fds: int
    max_fds: float
    virtual_memory_bytes: float
    resident_memory_bytes: float
    start_time_seconds: float
