"""
Pytest configuration and shared fixtures for the procmetrics test suite.

This module provides a synthetic procfs tree builder, a fake runtime stats
reader, and cache cleanup shared by all test modules.
"""

import shutil
import sys
import tempfile
from pathlib import Path
from typing import Dict, Iterable, Optional

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from procmetrics.models.samples import GCStats, ProcessTimes  # noqa: E402
from procmetrics.system.runtime import RuntimeStatsReader  # noqa: E402


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


# ============================================================================
# Synthetic procfs
# ============================================================================

FAKE_PID = 4242
START_TIME_JIFFIES = 12345
VSIZE_BYTES = 987654321
RSS_PAGES = 100
BOOT_TIME = 1700000000

LIMITS_TEXT = (
    "Limit                     Soft Limit           Hard Limit           Units     \n"
    "Max cpu time              unlimited            unlimited            seconds   \n"
    "Max file size             unlimited            unlimited            bytes     \n"
    "Max open files            1024                 4096                 files     \n"
    "Max locked memory         65536                65536                bytes     \n"
)

SYSTEM_STAT_TEXT = (
    "cpu  2255 34 2290 22625563 6290 127 456 0 0 0\n"
    "cpu0 1132 34 1441 11311718 3675 127 438 0 0 0\n"
    "intr 114930548 113199788 3 0 5 263 0 4 [... lots more numbers ...]\n"
    "ctxt 1990473\n"
    f"btime {BOOT_TIME}\n"
    "processes 2915\n"
    "procs_running 1\n"
    "procs_blocked 0\n"
)


def make_stat_line(
    pid: int = FAKE_PID,
    comm: str = "python (worker) x",
    start_time: int = START_TIME_JIFFIES,
    vsize: int = VSIZE_BYTES,
    rss: int = RSS_PAGES,
    field_count: int = 50,
) -> str:
    """
    Build a ``/proc/<pid>/stat`` line.

    `field_count` is the number of fields after the closing parenthesis;
    index 0 of those is the process state.
    """
    fields = ["0"] * field_count
    if field_count > 0:
        fields[0] = "S"
    for index, value in ((19, start_time), (20, vsize), (21, rss)):
        if index < field_count:
            fields[index] = str(value)
    return f"{pid} ({comm}) {' '.join(fields)}\n"


def build_procfs(
    root: Path,
    pid: int = FAKE_PID,
    fds: Iterable[str] = ("0", "1", "2", "5"),
    limits: str = LIMITS_TEXT,
    stat: Optional[str] = None,
    system_stat: str = SYSTEM_STAT_TEXT,
    omit: Iterable[str] = (),
) -> Dict[str, Path]:
    """
    Create a synthetic procfs tree under `root`.

    `omit` names parts ("fd", "limits", "stat", "system_stat") to leave out.
    """
    process_dir = root / str(pid)
    process_dir.mkdir(parents=True, exist_ok=True)
    paths = {
        "root": root,
        "fd": process_dir / "fd",
        "limits": process_dir / "limits",
        "stat": process_dir / "stat",
        "system_stat": root / "stat",
    }
    omit = set(omit)
    if "fd" not in omit:
        paths["fd"].mkdir()
        for fd in fds:
            (paths["fd"] / fd).write_text("")
    if "limits" not in omit:
        paths["limits"].write_text(limits)
    if "stat" not in omit:
        paths["stat"].write_text(stat if stat is not None else make_stat_line(pid=pid))
    if "system_stat" not in omit:
        paths["system_stat"].write_text(system_stat)
    return paths


class FakeRuntimeStatsReader(RuntimeStatsReader):
    """Runtime stats reader returning fixed values."""

    def __init__(self, gc_stats: Optional[GCStats] = None, times: Optional[ProcessTimes] = None):
        self._gc_stats = gc_stats or GCStats(
            heap_size_bytes=1000.0,
            free_bytes=200.0,
            total_bytes=5000.0,
            unmapped_bytes=30.0,
            bytes_since_gc=42.0,
        )
        self._times = times or ProcessTimes(user_seconds=1.25, system_seconds=0.5)
        self.calls = 0

    def gc_stats(self) -> GCStats:
        self.calls += 1
        return self._gc_stats

    def process_times(self) -> ProcessTimes:
        return self._times


class FailingRuntimeStatsReader(RuntimeStatsReader):
    """Runtime stats reader whose runtime cannot report anything."""

    def gc_stats(self) -> GCStats:
        raise RuntimeError("runtime stats unavailable")

    def process_times(self) -> ProcessTimes:
        raise RuntimeError("runtime stats unavailable")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def fake_procfs(temp_dir):
    """A complete, well-formed synthetic procfs tree."""
    return build_procfs(temp_dir / "proc")


@pytest.fixture
def fake_reader():
    """A runtime stats reader with fixed values."""
    return FakeRuntimeStatsReader()


@pytest.fixture(autouse=True)
def clear_caches_after_test():
    """Reset configuration and the process-wide page size after each test."""
    yield

    from procmetrics.config import set_config_path
    from procmetrics.system.runtime import reset_page_size_cache

    set_config_path(None)
    reset_page_size_cache()
