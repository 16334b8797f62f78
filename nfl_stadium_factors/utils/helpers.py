"""
Helpers - General helper functions.

This module contains:
- round_factor: Round a multiplier to its canonical 3-decimal form
- round_half_up: Round to the nearest whole number, halves up
- format_reading: Format a weather reading for display
- format_factor: Format a factor for display
"""

import math


def round_factor(value: float) -> float:
    """
    Round a multiplier to 3 decimals, halves rounded up.

    Args:
        value: Raw multiplier

    Returns:
        Multiplier in canonical 3-decimal form
    """
    return math.floor(value * 1000 + 0.5) / 1000


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounded up."""
    return int(math.floor(value + 0.5))


def format_reading(value: float) -> str:
    """
    Format a temperature or wind reading without trailing zeros.

    Examples:
        25.0 -> "25", 12.5 -> "12.5"
    """
    return f"{value:g}"


def format_factor(value: float) -> str:
    """Format a factor for display (e.g., 0.95 -> "0.950")."""
    return f"{value:.3f}"
