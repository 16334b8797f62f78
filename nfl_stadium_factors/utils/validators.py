"""
Validators - Input validation utilities.

This module contains:
- ValidationError: Custom validation exception
- validate_game_date: Parse and validate a requested game date
- validate_output_format: Validate an export format name
"""

from datetime import date, datetime
from typing import Any, Optional, Union

# Supported export formats
OUTPUT_FORMATS = ("json", "markdown")


class ValidationError(Exception):
    """Custom exception for validation errors."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field that failed validation
            value: Value that failed validation
        """
        self.message = message
        self.field = field
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.field:
            return f"Validation error on '{self.field}': {self.message} (got: {self.value})"
        return self.message


def validate_game_date(value: Union[date, datetime, str]) -> date:
    """
    Validate a requested game date.

    Accepts a date, a datetime (the date part is used) or an ISO
    ``YYYY-MM-DD`` string.

    Args:
        value: Requested date

    Returns:
        The date as a ``datetime.date``

    Raises:
        ValidationError: If the value is not a date or a parseable string
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), "%Y-%m-%d").date()
        except ValueError:
            raise ValidationError(
                "Date must be in YYYY-MM-DD format",
                field="date",
                value=value
            ) from None

    raise ValidationError("Date must be a date or YYYY-MM-DD string", field="date", value=value)


def validate_output_format(fmt: str, raise_error: bool = True) -> bool:
    """
    Validate an export format name.

    Args:
        fmt: Format name
        raise_error: Whether to raise exception on invalid

    Returns:
        True if valid, False if invalid (when raise_error=False)

    Raises:
        ValidationError: If format is invalid and raise_error=True
    """
    if fmt in OUTPUT_FORMATS:
        return True

    if raise_error:
        raise ValidationError(
            f"Unknown output format. Valid formats: {', '.join(OUTPUT_FORMATS)}",
            field="format",
            value=fmt
        )
    return False
