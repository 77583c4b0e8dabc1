"""
Runtime and operating system queries.

This module provides:
- RuntimeStatsReader: the interface the generic sample source reads memory
  and CPU counters through.
- PsutilRuntimeStatsReader: the default reader, backed by psutil.
- get_page_size / get_clock_ticks: cached and uncached sysconf queries used by
  the procfs sample source.
"""

import gc
import logging
import os
import threading
import tracemalloc
from abc import ABC, abstractmethod
from typing import Optional

import psutil

from ..models.config import DEFAULT_PAGE_SIZE
from ..models.samples import GCStats, ProcessTimes

logger = logging.getLogger(__name__)

# Process-wide page size; written once, then only read.
_PAGE_SIZE: Optional[int] = None
_PAGE_SIZE_LOCK = threading.Lock()


def _query_page_size() -> Optional[int]:
    try:
        page_size = os.sysconf("SC_PAGE_SIZE")
    except (ValueError, OSError, AttributeError) as e:
        logger.warning(f"Could not query page size from the OS: {e}")
        return None
    if page_size is None or page_size <= 0:
        logger.warning(f"OS reported an unusable page size: {page_size}")
        return None
    return int(page_size)


def get_page_size(default: int = DEFAULT_PAGE_SIZE) -> int:
    """
    Return the system page size in bytes, querying the OS only once per process.

    Args:
        default: Value cached when the OS cannot report a page size.

    Returns:
        Page size in bytes.
    """
    global _PAGE_SIZE
    if _PAGE_SIZE is None:
        with _PAGE_SIZE_LOCK:
            if _PAGE_SIZE is None:
                page_size = _query_page_size()
                if page_size is None:
                    logger.warning(f"Falling back to default page size of {default} bytes")
                    page_size = default
                _PAGE_SIZE = page_size
                logger.debug(f"Page size cached: {_PAGE_SIZE} bytes")
    return _PAGE_SIZE


def reset_page_size_cache() -> None:
    """Forget the cached page size. Intended for tests."""
    global _PAGE_SIZE
    with _PAGE_SIZE_LOCK:
        _PAGE_SIZE = None


def get_clock_ticks() -> int:
    """
    Return the kernel clock tick rate (jiffies per second).

    Raises:
        ValueError / OSError: If the OS cannot report a usable tick rate.
    """
    ticks = os.sysconf("SC_CLK_TCK")
    if ticks <= 0:
        raise ValueError(f"invalid clock tick rate: {ticks}")
    return ticks


class _AllocationsSinceCollection:
    """
    Tracks bytes allocated since the last completed garbage collection.

    Relies on tracemalloc; reports 0 while tracemalloc is not tracing.
    """

    def __init__(self):
        self._baseline = 0
        self._installed = False
        self._lock = threading.Lock()

    def _on_gc(self, phase, info):
        if phase == "stop" and tracemalloc.is_tracing():
            self._baseline = tracemalloc.get_traced_memory()[0]

    def install(self) -> None:
        with self._lock:
            if not self._installed:
                gc.callbacks.append(self._on_gc)
                self._installed = True

    def current(self) -> float:
        self.install()
        if not tracemalloc.is_tracing():
            return 0.0
        traced, _peak = tracemalloc.get_traced_memory()
        return float(max(traced - self._baseline, 0))


_ALLOCATIONS = _AllocationsSinceCollection()


class RuntimeStatsReader(ABC):
    """
    Interface for reading memory and CPU counters from the running process.

    Errors raised by implementations are treated as fatal by the sample
    sources and propagated unchanged.
    """

    @abstractmethod
    def gc_stats(self) -> GCStats:
        """Return the current memory counters."""
        pass

    @abstractmethod
    def process_times(self) -> ProcessTimes:
        """Return the CPU time consumed so far."""
        pass


class PsutilRuntimeStatsReader(RuntimeStatsReader):
    """
    Reads memory and CPU counters for a process using psutil.

    Memory mapping onto the collector-style counters:
        heap size   -> USS (memory unique to the process), RSS if unavailable
        total       -> RSS
        free        -> RSS minus heap size (resident but shared)
        unmapped    -> swapped-out bytes, 0 where psutil does not report swap
        since GC    -> tracemalloc bytes allocated since the last collection;
                       only known for the current process, 0 for any other
    """

    def __init__(self, pid: Optional[int] = None):
        self.pid = pid
        self._process = psutil.Process(pid)

    def _is_current_process(self) -> bool:
        return self.pid is None or self.pid == os.getpid()

    def _memory_info(self):
        try:
            return self._process.memory_full_info()
        except psutil.AccessDenied:
            logger.debug(f"memory_full_info denied for PID {self._process.pid}, using memory_info")
            return self._process.memory_info()

    def gc_stats(self) -> GCStats:
        mem = self._memory_info()
        total = float(mem.rss)
        heap = float(mem.uss) if hasattr(mem, "uss") else total
        unmapped = float(mem.swap) if hasattr(mem, "swap") else 0.0
        return GCStats(
            heap_size_bytes=heap,
            free_bytes=max(total - heap, 0.0),
            total_bytes=total,
            unmapped_bytes=unmapped,
            bytes_since_gc=_ALLOCATIONS.current() if self._is_current_process() else 0.0,
        )

    def process_times(self) -> ProcessTimes:
        times = self._process.cpu_times()
        return ProcessTimes(user_seconds=float(times.user), system_seconds=float(times.system))
