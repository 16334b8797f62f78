"""
Utils package - Utility functions and helpers.

This package contains:
- validators.py: Input validation utilities
- helpers.py: Rounding and formatting helpers
- log.py: Logging setup
"""

from nfl_stadium_factors.utils.validators import (
    validate_game_date,
    validate_output_format,
    ValidationError,
    OUTPUT_FORMATS,
)
from nfl_stadium_factors.utils.helpers import (
    round_factor,
    round_half_up,
    format_reading,
    format_factor,
)

__all__ = [
    "validate_game_date",
    "validate_output_format",
    "ValidationError",
    "OUTPUT_FORMATS",
    "round_factor",
    "round_half_up",
    "format_reading",
    "format_factor",
]
