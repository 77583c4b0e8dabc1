"""
Parsers for the per-process text files exposed by procfs.

The kernel's text formats are loosely structured, so every parser here fails
loudly with an InstrumentationError naming the file it was given rather than
returning a guess. Parsers take the raw text; reading the files is left to the
caller so the parsers can be exercised without a real /proc.

Files handled:
- ``<root>/<pid>/fd/``   directory of open descriptors
- ``<root>/<pid>/limits`` resource limits table
- ``<root>/<pid>/stat``  single line of space separated process fields
- ``<root>/stat``        kernel/system statistics (boot time)
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Optional, Union

from ..models.samples import ProcStatFields
from ..validation import InstrumentationError

logger = logging.getLogger(__name__)

MAX_OPEN_FILES_PATTERN = re.compile(r"^Max open files\s+(\d+)")
BOOT_TIME_PATTERN = re.compile(r"^btime\s+(\d+)")

# Indices into the fields that follow the closing parenthesis of the
# process name; index 0 is the process state.
STAT_START_TIME_INDEX = 19
STAT_VSIZE_INDEX = 20
STAT_RSS_INDEX = 21
STAT_MIN_FIELDS = STAT_RSS_INDEX + 1

_PSEUDO_ENTRIES = frozenset((".", ".."))

PathLike = Union[str, Path]


def find_first_match(lines: Iterable[str], pattern: re.Pattern) -> Optional[str]:
    """
    Return the first capture group of the first line matching ``pattern``.

    Args:
        lines: Lines to scan, in order.
        pattern: Compiled pattern with one capture group, applied with match().

    Returns:
        The captured text, or None if no line matches.
    """
    for line in lines:
        match = pattern.match(line)
        if match:
            return match.group(1)
    return None


def count_open_fds(entries: Iterable[str]) -> int:
    """
    Count file descriptor entries, ignoring the ``.`` and ``..`` pseudo-entries.

    Examples:
        >>> count_open_fds(["0", "1", "2", ".", "..", "5"])
        4
    """
    return sum(1 for entry in entries if entry not in _PSEUDO_ENTRIES)


def parse_max_open_files(text: str, path: PathLike) -> float:
    """
    Extract the soft "Max open files" limit from a limits file.

    Args:
        text: Contents of ``<root>/<pid>/limits``.
        path: Path the text was read from, used in error messages.

    Raises:
        InstrumentationError: If no line carries a numeric limit.
    """
    value = find_first_match(text.splitlines(), MAX_OPEN_FILES_PATTERN)
    if value is None:
        raise InstrumentationError(f'"Max open files" not found in {path}', path=path)
    return float(value)


def parse_stat_fields(text: str, path: PathLike) -> ProcStatFields:
    """
    Extract start time, virtual memory and resident pages from a stat line.

    The second field of the line is the process name in parentheses and may
    itself contain spaces or parentheses, so only the text after the last
    ``)`` is split.

    Args:
        text: Contents of ``<root>/<pid>/stat``.
        path: Path the text was read from, used in error messages.

    Raises:
        InstrumentationError: If fewer than 22 fields follow the process name,
            or a needed field is not numeric.
    """
    parts = text.rsplit(")", 1)[-1].split()
    try:
        return ProcStatFields(
            start_time_jiffies=float(parts[STAT_START_TIME_INDEX]),
            virtual_memory_bytes=float(parts[STAT_VSIZE_INDEX]),
            resident_pages=float(parts[STAT_RSS_INDEX]),
        )
    except (IndexError, ValueError) as err:
        raise InstrumentationError(
            f"Error reading procfs: {path} malformed? "
            f"(expected at least {STAT_MIN_FIELDS} numeric fields after ')', got {len(parts)})",
            path=path,
        ) from err


def parse_boot_time(text: str, path: PathLike) -> float:
    """
    Extract the system boot time (epoch seconds) from the root stat file.

    Raises:
        InstrumentationError: If no ``btime`` line is present.
    """
    value = find_first_match(text.splitlines(), BOOT_TIME_PATTERN)
    if value is None:
        raise InstrumentationError(f'"btime" not found in {path}', path=path)
    return float(value)
