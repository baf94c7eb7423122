"""
Domain models and value objects.

Contains the arbitrary-precision integer value type and its errors.
"""

from largenum.core.domain.big_value import (
    DECIMAL_LITERAL_PATTERN,
    DIGIT_CHUNK_SIZE,
    BigValue,
    DivisionByZero,
    InvalidFormat,
    parse_decimal_literal,
)

__all__ = [
    # Constants
    "DECIMAL_LITERAL_PATTERN",
    "DIGIT_CHUNK_SIZE",
    # Model
    "BigValue",
    # Exceptions
    "DivisionByZero",
    "InvalidFormat",
    # Functions
    "parse_decimal_literal",
]
