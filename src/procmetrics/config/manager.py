"""
Configuration management and singleton pattern.

This module provides the main configuration access point, loading the
exporter configuration at most once per process.
"""

import logging
from pathlib import Path
from typing import Optional

from ..models.config import ExporterConfig
from ..validation import handle_config_error, ErrorSeverity
from .loader import load_exporter_section
from .validators import validate_exporter_config

logger = logging.getLogger(__name__)

# --- Global Singleton for Configuration ---

_CONFIG: Optional[ExporterConfig] = None

# No path means built-in defaults; set_config_path() points this at a TOML file.
_CONFIG_FILE_PATH: Optional[Path] = None


def set_config_path(config_path: Optional[Path]) -> None:
    """
    Set a custom configuration file path.

    Args:
        config_path: Path to a TOML file with an ``[exporter]`` table, or None
                     to return to built-in defaults.
    """
    global _CONFIG_FILE_PATH, _CONFIG
    _CONFIG_FILE_PATH = Path(config_path) if config_path is not None else None
    _CONFIG = None
    logger.info(f"Configuration path set to: {config_path}")


def clear_config_cache() -> None:
    """
    Clear the cached configuration, forcing a reload on next access.
    """
    global _CONFIG
    _CONFIG = None
    logger.debug("Configuration cache cleared")


def _load_config(config_path: Optional[Path]) -> ExporterConfig:
    """
    Load and validate the exporter configuration.

    Raises:
        FileNotFoundError: If the configuration file is missing
        ValidationError: If configuration validation fails
        tomllib.TOMLDecodeError: If the TOML file is malformed
    """
    if config_path is None:
        logger.debug("No configuration file set, using defaults")
        return ExporterConfig()

    try:
        exporter_data = load_exporter_section(config_path)
        config = validate_exporter_config(exporter_data)
        logger.info(
            f"Loaded exporter configuration: procfs_root={config.procfs_root}, "
            f"pid={config.pid}, enable_procfs={config.enable_procfs}"
        )
        return config
    except Exception as e:
        handle_config_error(
            error=e,
            context="loading exporter configuration",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise


def get_config() -> ExporterConfig:
    """
    Get the global exporter configuration, loading it if necessary.

    Returns:
        The singleton ExporterConfig instance
    """
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = _load_config(_CONFIG_FILE_PATH)
    return _CONFIG


def is_config_loaded() -> bool:
    """Check if configuration has been loaded and cached."""
    return _CONFIG is not None


def get_config_info() -> dict:
    """
    Get information about the current configuration state.

    Returns:
        Dictionary with configuration metadata
    """
    return {
        "config_loaded": is_config_loaded(),
        "config_path": str(_CONFIG_FILE_PATH) if _CONFIG_FILE_PATH else None,
        "procfs_root": str(_CONFIG.procfs_root) if _CONFIG else None,
        "enable_procfs": _CONFIG.enable_procfs if _CONFIG else None,
    }
