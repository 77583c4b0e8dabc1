"""
Sample sources for process resource metrics.

This package provides the two tiers of sampling:

- GenericSampleSource: memory and CPU counters reported by the runtime,
  available everywhere psutil runs
- ProcFSSampleSource: the generic samples plus open file descriptors, the
  open-file limit, virtual/resident memory and process start time, parsed
  from procfs

`detect_capability` checks the filesystem for what a process supports, and
`create_sample_source` builds the matching source.
"""

from .base import SampleSource, SourceKind
from .generic import GenericSampleSource
from .procfs import ProcFSSampleSource
from .factory import create_sample_source, detect_capability

__all__ = [
    "SampleSource",
    "SourceKind",
    "GenericSampleSource",
    "ProcFSSampleSource",
    "create_sample_source",
    "detect_capability",
]
