"""Validation utilities for PairFX.

This module provides reusable validation functions with consistent error handling.
"""

from typing import Any, Optional

from pairfx.constants import DISPLAY_MODES, FORMAT_RUN_THROUGH, VALID_RESULTS
from pairfx.exceptions import (
    InvalidConfigurationException,
    InvalidPlayerDataException,
    InvalidResultException,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Result Validation ==========


def validate_result(result: Any) -> ValidationResult:
    """Validate a match result token.

    Args:
        result: Result token to validate

    Returns:
        ValidationResult with validation status

    Example:
        >>> bool(validate_result("1/2-1/2"))
        True
        >>> bool(validate_result("2-0"))
        False
    """
    if result in VALID_RESULTS:
        return ValidationResult(is_valid=True, sanitized_value=result)
    return ValidationResult(
        is_valid=False,
        error_message=(
            f"Invalid result format: {result!r} "
            f"(expected one of {', '.join(VALID_RESULTS)})"
        ),
    )


def validate_result_strict(result: Any) -> str:
    """Validate a result token and raise exception if invalid.

    Raises:
        InvalidResultException: If result is not a known token
    """
    validation = validate_result(result)
    if not validation.is_valid:
        raise InvalidResultException(validation.error_message)
    return validation.sanitized_value


# ========== Name Validation ==========


def validate_first_name(first_name: Optional[str]) -> ValidationResult:
    """Validate a player's first name: required, surrounding whitespace stripped."""
    if not first_name or not str(first_name).strip():
        return ValidationResult(
            is_valid=False,
            error_message="First name is required",
        )
    return ValidationResult(is_valid=True, sanitized_value=str(first_name).strip())


def validate_first_name_strict(first_name: Optional[str]) -> str:
    """Validate a first name and return it stripped.

    Raises:
        InvalidPlayerDataException: If the first name is empty
    """
    result = validate_first_name(first_name)
    if not result.is_valid:
        raise InvalidPlayerDataException(result.error_message)
    return result.sanitized_value


# ========== Settings Validation ==========


def validate_non_negative_integer(
    value: Any, field_name: str = "Value"
) -> ValidationResult:
    """Validate that a value is an integer >= 0 (booleans are rejected).

    Args:
        value: Value to validate
        field_name: Name of the field for error messages

    Returns:
        ValidationResult with validation status
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a whole number: {value!r}",
        )
    if value < 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} cannot be negative: {value}",
        )
    return ValidationResult(is_valid=True, sanitized_value=value)


def validate_non_negative_number(
    value: Any, field_name: str = "Value"
) -> ValidationResult:
    """Validate that a value is a number >= 0 (booleans are rejected).

    Args:
        value: Value to validate
        field_name: Name of the field for error messages

    Returns:
        ValidationResult with validation status
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a number: {value!r}",
        )
    if value < 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} cannot be negative: {value}",
        )
    return ValidationResult(is_valid=True, sanitized_value=value)


def validate_display_mode(display_mode: Any) -> ValidationResult:
    """Validate the standings display mode ("points" or "percentage")."""
    if display_mode in DISPLAY_MODES:
        return ValidationResult(is_valid=True, sanitized_value=display_mode)
    return ValidationResult(
        is_valid=False,
        error_message=f"Unknown display mode: {display_mode!r}",
    )


def validate_settings(
    format: Any,
    display_mode: Any,
    constraint_x: Any,
    constraint_y: Any,
    avoid_same_class: Any,
) -> None:
    """Validate a full set of tournament settings.

    Raises:
        InvalidConfigurationException: On the first invalid value
    """
    if format != FORMAT_RUN_THROUGH:
        raise InvalidConfigurationException(f"Unsupported tournament format: {format!r}")

    checks = (
        validate_display_mode(display_mode),
        validate_non_negative_integer(constraint_x, "Constraint X"),
        validate_non_negative_number(constraint_y, "Constraint Y"),
    )
    for check in checks:
        if not check.is_valid:
            raise InvalidConfigurationException(check.error_message)

    if not isinstance(avoid_same_class, bool):
        raise InvalidConfigurationException(
            f"Avoid same class must be true or false: {avoid_same_class!r}"
        )
