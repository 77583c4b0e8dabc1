"""
Configuration validation utilities.
"""

import logging
from typing import Any, Dict

from ..models.config import DEFAULT_PAGE_SIZE, DEFAULT_PROCFS_ROOT, ExporterConfig
from ..validation import (
    validate_absolute_path,
    validate_boolean,
    validate_positive_integer,
)

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {"procfs_root", "pid", "default_page_size", "enable_procfs"}


def validate_exporter_config(exporter_data: Dict[str, Any]) -> ExporterConfig:
    """
    Validate and create an ExporterConfig from raw configuration data.

    Args:
        exporter_data: Raw ``[exporter]`` table from TOML

    Returns:
        Validated ExporterConfig instance

    Raises:
        ValidationError: If validation fails
    """
    unknown = sorted(set(exporter_data) - _KNOWN_KEYS)
    if unknown:
        logger.warning(f"Ignoring unknown exporter settings: {', '.join(unknown)}")

    procfs_root = validate_absolute_path(
        exporter_data.get("procfs_root", str(DEFAULT_PROCFS_ROOT)),
        field_name="exporter.procfs_root",
    )

    pid = exporter_data.get("pid")
    if pid is not None:
        pid = validate_positive_integer(pid, min_value=1, field_name="exporter.pid")

    default_page_size = validate_positive_integer(
        exporter_data.get("default_page_size", DEFAULT_PAGE_SIZE),
        min_value=1,
        field_name="exporter.default_page_size",
    )

    enable_procfs = validate_boolean(
        exporter_data.get("enable_procfs", True),
        field_name="exporter.enable_procfs",
    )

    return ExporterConfig(
        procfs_root=procfs_root,
        pid=pid,
        default_page_size=default_page_size,
        enable_procfs=enable_procfs,
    )
