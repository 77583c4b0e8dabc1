"""
Exception types and error handling helpers.

This module provides the exceptions raised by the exporter together with a
small helper for the log-then-reraise pattern used across the package.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """How loudly an error is logged before it propagates."""
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class MetricsError(Exception):
    """Base class for all errors raised by procmetrics."""


class InstrumentationError(MetricsError):
    """
    Raised when required data cannot be extracted from the process-info source.

    Either a required line is absent from a procfs file, or a file's structure
    does not match the expected field count. The originating exception, when
    there is one, is chained as ``__cause__``.
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


class ValidationError(MetricsError):
    """
    Exception raised when configuration validation fails.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, severity: ErrorSeverity = ErrorSeverity.ERROR):
        super().__init__(message)
        self.field_name = field_name
        self.value = value
        self.severity = severity


def handle_error(
    error: Exception,
    context: str,
    severity: ErrorSeverity = ErrorSeverity.ERROR,
    reraise: bool = True,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Log an error with its context, then re-raise it unless told otherwise.

    CRITICAL errors are logged with their traceback.
    """
    log = logger or globals()['logger']
    log.log(
        severity.value,
        f"Error in {context}: {error}",
        exc_info=severity is ErrorSeverity.CRITICAL,
    )
    if reraise:
        raise error


def handle_config_error(error: Exception, context: str, **kwargs) -> None:
    """Handle configuration-related errors."""
    handle_error(error, f"config {context}", **kwargs)
