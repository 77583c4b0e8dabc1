"""
Configuration data models.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

DEFAULT_PROCFS_ROOT = Path("/proc")
DEFAULT_PAGE_SIZE = 4096


@dataclass
class ExporterConfig:
    """
    Configuration for the standard exports, loaded from the ``[exporter]``
    table of a TOML file.
    """

    # Root of the process-info filesystem; tests point this at a synthetic tree.
    procfs_root: Path = field(default_factory=lambda: DEFAULT_PROCFS_ROOT)
    # Process to report on. None means the current process.
    pid: Optional[int] = None
    # Used when the operating system cannot report its page size.
    default_page_size: int = DEFAULT_PAGE_SIZE
    # When False the procfs tier is never selected.
    enable_procfs: bool = True
