"""
Defines the abstract interface shared by all sample sources.

A sample source is constructed once per exported metric and then invoked
repeatedly, once per collection, by whatever owns the metric.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator, List

from ..models.samples import Sample


class SourceKind(Enum):
    """Which tier of sample source a process supports."""

    PROCFS = "procfs"
    GENERIC = "generic"


class SampleSource(ABC):
    """
    Abstract base class for sample sources.

    Subclasses implement `collect`, which must either yield every sample for
    one collection or raise before yielding any.
    """

    kind: SourceKind
    SUFFIXES: List[str] = []
    """Suffixes of the samples `collect` yields, in order."""

    @abstractmethod
    def collect(self) -> Iterator[Sample]:
        """
        A generator yielding the samples of one collection, in a fixed order.

        Calling it again starts a fresh collection.
        """
        pass

    def suffixes(self) -> List[str]:
        """Return the sample suffixes this source yields, in order."""
        return list(self.SUFFIXES)
