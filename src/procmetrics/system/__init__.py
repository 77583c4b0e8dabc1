"""
System interaction utilities.

- procfs: parsers for the kernel's per-process text files
- runtime: runtime stats readers and cached sysconf queries
"""

from .procfs import (
    count_open_fds,
    find_first_match,
    parse_boot_time,
    parse_max_open_files,
    parse_stat_fields,
)
from .runtime import (
    PsutilRuntimeStatsReader,
    RuntimeStatsReader,
    get_clock_ticks,
    get_page_size,
    reset_page_size_cache,
)

__all__ = [
    # procfs parsing
    "count_open_fds",
    "find_first_match",
    "parse_boot_time",
    "parse_max_open_files",
    "parse_stat_fields",
    # runtime
    "PsutilRuntimeStatsReader",
    "RuntimeStatsReader",
    "get_clock_ticks",
    "get_page_size",
    "reset_page_size_cache",
]
