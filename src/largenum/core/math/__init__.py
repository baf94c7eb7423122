"""
Core math modules для largenum

Форматирование больших чисел для отображения.
"""

from largenum.core.math.magnitude import (
    DEFAULT_FORMAT_CONFIG,
    DISPLAY_DECIMALS_DEFAULT,
    DISPLAY_PRECISION_DEFAULT,
    GROUP_DIGITS,
    SUFFIXES,
    FormattedMagnitude,
    MagnitudeFormatConfig,
    compute_magnitude,
    digit_count,
    format_magnitude,
    magnitude_exponent,
    suffix_for,
)

__all__ = [
    # Magnitude — Constants
    "DEFAULT_FORMAT_CONFIG",
    "DISPLAY_DECIMALS_DEFAULT",
    "DISPLAY_PRECISION_DEFAULT",
    "GROUP_DIGITS",
    "SUFFIXES",
    # Magnitude — Types
    "FormattedMagnitude",
    "MagnitudeFormatConfig",
    # Magnitude — Functions
    "compute_magnitude",
    "digit_count",
    "format_magnitude",
    "magnitude_exponent",
    "suffix_for",
]
