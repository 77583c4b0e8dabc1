"""
The standard process exports metric.

StandardExports ties a sample source to a metric name and docstring so a
registry can expose it. Use `make_standard_exports` to build one with the
richest sample source the current system supports.
"""

import logging
import os
from pathlib import Path
from typing import Any, Iterator, Optional, Union

from .collectors import SampleSource, SourceKind, create_sample_source, detect_capability
from .config import get_config
from .models.samples import Sample
from .system.runtime import RuntimeStatsReader
from .validation import ErrorSeverity, InstrumentationError, handle_error

logger = logging.getLogger(__name__)


class StandardExports:
    """
    A gauge-type metric reporting basic process statistics.

    Args:
        name: Metric name; each sample's suffix is appended to it.
        docstring: Help text for the metric.
        source: The sample source to report from.
        registry: Optional registry; anything with a ``register(metric)``
                  method. The metric registers itself when given one.
    """

    TYPE = "gauge"

    def __init__(
        self,
        name: str,
        docstring: str,
        source: SampleSource,
        registry: Optional[Any] = None,
    ):
        if not name:
            raise ValueError("Metric name must not be empty")
        self.name = name
        self.docstring = docstring
        self.source = source
        logger.info(f"StandardExports '{name}' using {source.kind.value} samples")
        if registry is not None:
            registry.register(self)

    @property
    def kind(self) -> SourceKind:
        return self.source.kind

    def full_name(self, sample: Sample) -> str:
        """Return the exposed name of a sample, e.g. ``process_open_fds``."""
        return f"{self.name}_{sample.suffix}"

    def samples(self) -> Iterator[Sample]:
        """
        Yield the samples of one collection.

        Raises:
            InstrumentationError: If procfs data is missing or malformed. It is
                logged before being re-raised to the caller.
        """
        try:
            yield from self.source.collect()
        except InstrumentationError as e:
            handle_error(
                error=e,
                context=f"collecting samples for '{self.name}'",
                severity=ErrorSeverity.ERROR,
                reraise=True,
                logger=logger,
            )


def make_standard_exports(
    name: str,
    docstring: str,
    registry: Optional[Any] = None,
    pid: Optional[int] = None,
    procfs_root: Optional[Union[str, Path]] = None,
    reader: Optional[RuntimeStatsReader] = None,
) -> StandardExports:
    """
    Check for system capabilities and build a StandardExports.

    Unset arguments fall back to the exporter configuration (see
    `procmetrics.config`), then to the current process and ``/proc``.

    Args:
        name: Metric name.
        docstring: Help text for the metric.
        registry: Optional registry to register with.
        pid: Process id to report on.
        procfs_root: Root of the procfs tree.
        reader: Runtime stats reader; a psutil reader for `pid` when omitted.

    Returns:
        A StandardExports whose source is procfs-backed when every procfs
        prerequisite is present, and generic otherwise.
    """
    config = get_config()
    if pid is None:
        pid = config.pid if config.pid is not None else os.getpid()
    if procfs_root is None:
        procfs_root = config.procfs_root

    if config.enable_procfs:
        kind = detect_capability(pid, procfs_root)
    else:
        logger.info("procfs samples disabled by configuration")
        kind = SourceKind.GENERIC

    source = create_sample_source(
        kind,
        pid=pid,
        procfs_root=procfs_root,
        reader=reader,
        default_page_size=config.default_page_size,
    )
    return StandardExports(name, docstring, source, registry=registry)
