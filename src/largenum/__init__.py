"""
largenum — arbitrary-precision integers with short-scale display formatting.

    >>> from largenum import BigValue, format_magnitude
    >>> format_magnitude(BigValue.parse("1234567"))
    '1.23 Million'
"""

from largenum.core.contracts import ParseResult, validate_big_integer_text
from largenum.core.domain import BigValue, DivisionByZero, InvalidFormat
from largenum.core.math import (
    SUFFIXES,
    FormattedMagnitude,
    MagnitudeFormatConfig,
    compute_magnitude,
    format_magnitude,
)

__version__ = "0.1.0"

__all__ = [
    "BigValue",
    "DivisionByZero",
    "InvalidFormat",
    "SUFFIXES",
    "FormattedMagnitude",
    "MagnitudeFormatConfig",
    "compute_magnitude",
    "format_magnitude",
    "ParseResult",
    "validate_big_integer_text",
]
