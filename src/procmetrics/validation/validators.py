"""
Validation functions for configuration values.
"""

from pathlib import Path
from typing import Any, Optional, Union

from .exceptions import ValidationError


def validate_positive_integer(
    value: Any,
    min_value: int = 1,
    max_value: Optional[int] = None,
    field_name: str = "value"
) -> int:
    """
    Validate that a value is a positive integer.

    Args:
        value: Value to validate
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive), None for no limit
        field_name: Name of the field being validated

    Returns:
        Validated integer value

    Raises:
        ValidationError: If validation fails
    """
    # bool is an int subclass; "true" is never a valid count
    if isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a valid integer, got {value}",
            field_name=field_name,
            value=value
        )
    try:
        int_value = int(value)
    except (ValueError, TypeError):
        raise ValidationError(
            f"{field_name} must be a valid integer, got {value}",
            field_name=field_name,
            value=value
        )
    if int_value < min_value:
        raise ValidationError(
            f"{field_name} must be >= {min_value}, got {int_value}",
            field_name=field_name,
            value=value
        )
    if max_value is not None and int_value > max_value:
        raise ValidationError(
            f"{field_name} must be <= {max_value}, got {int_value}",
            field_name=field_name,
            value=value
        )
    return int_value


def validate_boolean(value: Any, field_name: str = "value") -> bool:
    """
    Validate that a value is a real boolean (TOML ``true``/``false``).

    Raises:
        ValidationError: If the value is not a bool
    """
    if not isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be true or false, got {value!r}",
            field_name=field_name,
            value=value
        )
    return value


def validate_absolute_path(path: Union[str, Path], field_name: str = "path") -> Path:
    """
    Validate that a path is non-empty and absolute.

    The path does not need to exist: a procfs root may legitimately be
    missing on some platforms, in which case the generic tier is used.

    Args:
        path: Path to validate
        field_name: Name of the field being validated

    Returns:
        Validated path

    Raises:
        ValidationError: If the path is empty or relative
    """
    if not isinstance(path, (str, Path)) or not str(path).strip():
        raise ValidationError(
            f"{field_name} must be a non-empty path",
            field_name=field_name,
            value=path
        )
    path_obj = Path(path)
    if not path_obj.is_absolute():
        raise ValidationError(
            f"{field_name} must be an absolute path, got {path}",
            field_name=field_name,
            value=path
        )
    return path_obj
