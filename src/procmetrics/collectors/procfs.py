"""
Sample source that extends the generic samples with procfs facts.

This module provides the ProcFSSampleSource class, which reads the open file
descriptor count, the open-file limit, virtual and resident memory, and the
process start time from a procfs tree (``/proc`` by default).
"""

import logging
import os
import threading
from pathlib import Path
from typing import Iterator, List, Optional, Union

from ..models.config import DEFAULT_PAGE_SIZE, DEFAULT_PROCFS_ROOT
from ..models.samples import ProcFSFacts, Sample
from ..system.procfs import (
    count_open_fds,
    parse_boot_time,
    parse_max_open_files,
    parse_stat_fields,
)
from ..system.runtime import (
    PsutilRuntimeStatsReader,
    RuntimeStatsReader,
    get_clock_ticks,
    get_page_size,
)
from ..validation import InstrumentationError
from .base import SampleSource, SourceKind
from .generic import GenericSampleSource

logger = logging.getLogger(__name__)


class ProcFSSampleSource(SampleSource):
    """
    Reports the generic samples followed by five samples read from procfs.

    The generic source is held rather than inherited from; its six samples
    are re-emitted unchanged ahead of the procfs ones.

    Attributes:
        pid: Process the procfs facts are read for.
        procfs_root: Root of the procfs tree.
        generic: The wrapped GenericSampleSource.
        _start_time: Start time in epoch seconds, filled on first collection.
        _start_time_lock: Guards the check-compute-store of `_start_time`.
    """

    PROCFS_SUFFIXES: List[str] = [
        "open_fds",
        "max_fds",
        "virtual_memory_bytes",
        "resident_memory_bytes",
        "start_time_seconds",
    ]
    SUFFIXES: List[str] = GenericSampleSource.SUFFIXES + PROCFS_SUFFIXES

    kind = SourceKind.PROCFS

    def __init__(
        self,
        pid: Optional[int] = None,
        procfs_root: Union[str, Path] = DEFAULT_PROCFS_ROOT,
        reader: Optional[RuntimeStatsReader] = None,
        generic: Optional[GenericSampleSource] = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ):
        """
        Args:
            pid: Process id to report on; defaults to the current process.
            procfs_root: Root of the procfs tree.
            reader: Stats reader for the wrapped generic source; a psutil
                    reader for `pid` when omitted. Ignored when `generic`
                    is given.
            generic: A ready-made generic source to wrap.
            default_page_size: Page size used if the OS cannot report one.
        """
        self.pid = pid if pid is not None else os.getpid()
        self.procfs_root = Path(procfs_root)
        if generic is None:
            generic = GenericSampleSource(
                reader if reader is not None else PsutilRuntimeStatsReader(self.pid)
            )
        self.generic = generic
        self.default_page_size = default_page_size

        self._start_time: Optional[float] = None
        self._start_time_lock = threading.Lock()

        logger.info(
            f"Initializing {self.__class__.__name__} for PID {self.pid} "
            f"under {self.procfs_root}"
        )

    @property
    def process_dir(self) -> Path:
        return self.procfs_root / str(self.pid)

    @property
    def fd_dir(self) -> Path:
        return self.process_dir / "fd"

    @property
    def limits_path(self) -> Path:
        return self.process_dir / "limits"

    @property
    def stat_path(self) -> Path:
        return self.process_dir / "stat"

    @property
    def system_stat_path(self) -> Path:
        return self.procfs_root / "stat"

    def _read(self, path: Path) -> str:
        """
        Read a procfs text file.

        Undecodable bytes (a process name may hold any) are replaced rather
        than failing the whole collection.
        """
        try:
            return path.read_text(errors="replace")
        except OSError as err:
            raise InstrumentationError(
                f"Error reading procfs: {path}: {err.strerror or err}", path=path
            ) from err

    def _start_time_seconds(self, start_time_jiffies: float) -> float:
        """
        Return the process start time, computing and caching it on first use.

        The start time of a process never changes, so ``<root>/stat`` is read
        at most once per instance.
        """
        with self._start_time_lock:
            if self._start_time is None:
                try:
                    tick_rate = get_clock_ticks()
                except (ValueError, OSError, AttributeError) as err:
                    raise InstrumentationError(
                        f"Error reading clock tick rate (SC_CLK_TCK): {err}"
                    ) from err
                path = self.system_stat_path
                boot_time = parse_boot_time(self._read(path), path)
                self._start_time = (start_time_jiffies / tick_rate) + boot_time
                logger.debug(
                    f"Start time for PID {self.pid} cached: {self._start_time} "
                    f"(jiffies={start_time_jiffies}, tick_rate={tick_rate}, btime={boot_time})"
                )
            return self._start_time

    def read_facts(self) -> ProcFSFacts:
        """
        Read every procfs-derived fact for one collection.

        Raises:
            InstrumentationError: If any file is unreadable or malformed. The
                message and `path` name that file, and the underlying error is
                chained as the cause.
        """
        fd_dir = self.fd_dir
        try:
            open_fds = count_open_fds(os.listdir(fd_dir))
        except OSError as err:
            raise InstrumentationError(
                f"Error reading procfs: {fd_dir}: {err.strerror or err}", path=fd_dir
            ) from err

        limits_path = self.limits_path
        max_fds = parse_max_open_files(self._read(limits_path), limits_path)

        stat_path = self.stat_path
        stat = parse_stat_fields(self._read(stat_path), stat_path)

        resident_memory = stat.resident_pages * get_page_size(self.default_page_size)
        start_time = self._start_time_seconds(stat.start_time_jiffies)

        return ProcFSFacts(
            open_fds=open_fds,
            max_fds=max_fds,
            virtual_memory_bytes=stat.virtual_memory_bytes,
            resident_memory_bytes=resident_memory,
            start_time_seconds=start_time,
        )

    def collect(self) -> Iterator[Sample]:
        # Gather everything before yielding so a failure yields no samples.
        facts = self.read_facts()
        generic_samples = list(self.generic.collect())

        yield from generic_samples

        yield Sample(float(facts.open_fds), "open_fds")
        yield Sample(float(facts.max_fds), "max_fds")
        yield Sample(float(facts.virtual_memory_bytes), "virtual_memory_bytes")
        yield Sample(float(facts.resident_memory_bytes), "resident_memory_bytes")
        yield Sample(float(facts.start_time_seconds), "start_time_seconds")
