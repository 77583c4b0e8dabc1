"""
Data models for the procmetrics package.

- samples: Sample and the runtime/procfs statistics it is derived from
- config: Exporter configuration
"""

from .config import DEFAULT_PAGE_SIZE, DEFAULT_PROCFS_ROOT, ExporterConfig
from .samples import GCStats, ProcessTimes, ProcFSFacts, ProcStatFields, Sample

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_PROCFS_ROOT",
    "ExporterConfig",
    "GCStats",
    "ProcessTimes",
    "ProcFSFacts",
    "ProcStatFields",
    "Sample",
]
