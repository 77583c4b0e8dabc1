"""
Validation and error handling for the procmetrics package.

This module provides the exporter's exception types, configuration value
validators, and consistent error reporting helpers.
"""

from .exceptions import (
    ErrorSeverity,
    InstrumentationError,
    MetricsError,
    ValidationError,
    handle_config_error,
    handle_error,
)

from .validators import (
    validate_absolute_path,
    validate_boolean,
    validate_positive_integer,
)

__all__ = [
    # Exceptions and handlers
    "ErrorSeverity",
    "InstrumentationError",
    "MetricsError",
    "ValidationError",
    "handle_error",
    "handle_config_error",
    # Validators
    "validate_absolute_path",
    "validate_boolean",
    "validate_positive_integer",
]
