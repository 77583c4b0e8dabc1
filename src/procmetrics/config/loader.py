"""
Configuration file loading utilities.

This module handles the low-level loading and parsing of the TOML file that
carries the ``[exporter]`` table.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)


def load_toml_file(file_path: Path) -> Dict[str, Any]:
    """
    Parse a TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the file is malformed
    """
    logger.info(f"Reading TOML from {file_path}")
    with open(file_path, "rb") as f:
        return tomllib.load(f)


def load_exporter_section(config_path: Path) -> Dict[str, Any]:
    """
    Load the ``[exporter]`` table of a configuration file.

    A file without the table yields an empty dictionary, so every setting
    falls back to its default.

    Args:
        config_path: Path to the TOML configuration file

    Returns:
        Raw exporter settings
    """
    data = load_toml_file(config_path)
    section = data.get("exporter", {})
    if not isinstance(section, dict):
        raise TypeError(f"[exporter] in {config_path} must be a table")
    return section
