"""
Sample source built only from runtime-reported memory and CPU counters.
"""

import logging
from typing import Iterator, List, Optional

from ..models.samples import Sample
from ..system.runtime import PsutilRuntimeStatsReader, RuntimeStatsReader
from .base import SampleSource, SourceKind

logger = logging.getLogger(__name__)


class GenericSampleSource(SampleSource):
    """
    Reports garbage-collector style memory counters and total CPU time.

    Works on any platform the stats reader supports. Reader failures are not
    caught here; a process that cannot report its own counters is broken.
    """

    SUFFIXES: List[str] = [
        "gc_heap_bytes",
        "gc_free_bytes",
        "gc_total_bytes",
        "gc_unmapped_bytes",
        "bytes_since_gc",
        "cpu_seconds_total",
    ]

    kind = SourceKind.GENERIC

    def __init__(self, reader: Optional[RuntimeStatsReader] = None):
        self.reader = reader if reader is not None else PsutilRuntimeStatsReader()
        logger.info(f"Initializing {self.__class__.__name__} with reader {self.reader.__class__.__name__}")

    def collect(self) -> Iterator[Sample]:
        gc_stats = self.reader.gc_stats()
        times = self.reader.process_times()

        yield Sample(float(gc_stats.heap_size_bytes), "gc_heap_bytes")
        yield Sample(float(gc_stats.free_bytes), "gc_free_bytes")
        yield Sample(float(gc_stats.total_bytes), "gc_total_bytes")
        yield Sample(float(gc_stats.unmapped_bytes), "gc_unmapped_bytes")
        yield Sample(float(gc_stats.bytes_since_gc), "bytes_since_gc")
        yield Sample(float(times.total_seconds), "cpu_seconds_total")
