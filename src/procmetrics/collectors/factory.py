"""
Capability detection and sample source construction.

Selecting a sample source is a two-step affair: `detect_capability` inspects
the filesystem and returns a SourceKind, and `create_sample_source` builds the
matching implementation from that tag.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from ..models.config import DEFAULT_PAGE_SIZE, DEFAULT_PROCFS_ROOT
from ..system.runtime import PsutilRuntimeStatsReader, RuntimeStatsReader
from .base import SampleSource, SourceKind

logger = logging.getLogger(__name__)


def _check(description: str, path: Path, want_dir: bool) -> bool:
    try:
        ok = path.is_dir() if want_dir else path.is_file()
    except OSError as e:
        # Permission errors and the like count as a failed check.
        logger.debug(f"Capability check for {description} at {path} failed: {e}")
        return False
    if not ok:
        logger.debug(f"Capability check for {description} at {path}: not present")
    return ok


def detect_capability(
    pid: Optional[int] = None,
    procfs_root: Union[str, Path] = DEFAULT_PROCFS_ROOT,
) -> SourceKind:
    """
    Decide whether the procfs sample source can run for a process.

    Checks, in order, for the ``<root>/<pid>/fd`` directory and the
    ``<root>/<pid>/limits``, ``<root>/<pid>/stat`` and ``<root>/stat`` files.
    Never raises: any filesystem error degrades to the generic tier.

    Args:
        pid: Process id; defaults to the current process.
        procfs_root: Root of the procfs tree.

    Returns:
        SourceKind.PROCFS if every check passes, otherwise SourceKind.GENERIC.
    """
    pid = pid if pid is not None else os.getpid()
    root = Path(procfs_root)
    process_dir = root / str(pid)

    checks = (
        ("fd directory", process_dir / "fd", True),
        ("limits file", process_dir / "limits", False),
        ("process stat file", process_dir / "stat", False),
        ("system stat file", root / "stat", False),
    )
    for description, path, want_dir in checks:
        if not _check(description, path, want_dir):
            logger.info(f"procfs unavailable for PID {pid} under {root}; using generic samples")
            return SourceKind.GENERIC

    logger.info(f"procfs available for PID {pid} under {root}")
    return SourceKind.PROCFS


def create_sample_source(
    kind: SourceKind,
    pid: Optional[int] = None,
    procfs_root: Union[str, Path] = DEFAULT_PROCFS_ROOT,
    reader: Optional[RuntimeStatsReader] = None,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> SampleSource:
    """
    Build the sample source for a previously detected capability.

    Args:
        kind: Result of `detect_capability`.
        pid: Process to report on; the default psutil reader follows it too.
        procfs_root: Root of the procfs tree for the procfs source.
        reader: Runtime stats reader; a psutil reader for `pid` when omitted.
        default_page_size: Page size fallback for the procfs source.

    Raises:
        ValueError: If the kind is unknown
    """
    if kind is SourceKind.PROCFS:
        from .procfs import ProcFSSampleSource

        return ProcFSSampleSource(
            pid=pid,
            procfs_root=procfs_root,
            reader=reader,
            default_page_size=default_page_size,
        )
    elif kind is SourceKind.GENERIC:
        from .generic import GenericSampleSource

        return GenericSampleSource(
            reader if reader is not None else PsutilRuntimeStatsReader(pid)
        )
    else:
        raise ValueError(f"Unknown sample source kind: {kind}")
