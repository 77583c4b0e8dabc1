"""
procmetrics: process resource metrics for a metrics registry.

This package produces a fixed set of process measurements (memory, CPU and
garbage-collector counters, plus open files, memory sizes and start time
where procfs is available) for a registry to expose.

The package is organized into specialized modules:
- models: Data structures (Sample, runtime statistics, configuration)
- validation: Exceptions and configuration value validation
- config: TOML configuration loading
- system: procfs parsers and runtime/OS queries
- collectors: The generic and procfs sample sources and their factory
- exports: The StandardExports metric wrapper

Usage:
    from procmetrics import make_standard_exports
    exports = make_standard_exports("process", "Process statistics")
    for sample in exports.samples():
        print(exports.full_name(sample), sample.value)
"""

from .config import clear_config_cache, get_config, set_config_path

from .models import ExporterConfig, GCStats, ProcessTimes, ProcFSFacts, Sample

from .validation import InstrumentationError, MetricsError, ValidationError

from .collectors import (
    GenericSampleSource,
    ProcFSSampleSource,
    SampleSource,
    SourceKind,
    create_sample_source,
    detect_capability,
)

from .system import PsutilRuntimeStatsReader, RuntimeStatsReader

from .exports import StandardExports, make_standard_exports

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "StandardExports",
    "make_standard_exports",
    "detect_capability",
    "create_sample_source",
    "SampleSource",
    "SourceKind",
    "GenericSampleSource",
    "ProcFSSampleSource",
    "RuntimeStatsReader",
    "PsutilRuntimeStatsReader",
    # Configuration
    "get_config",
    "set_config_path",
    "clear_config_cache",
    # Models
    "ExporterConfig",
    "GCStats",
    "ProcessTimes",
    "ProcFSFacts",
    "Sample",
    # Errors
    "InstrumentationError",
    "MetricsError",
    "ValidationError",
]
