"""
Contract Validation Module

Валидация текстового ввода и JSON контрактов сериализованных значений.
"""

from .validators import (
    INVALID_BIG_INTEGER_MESSAGE,
    BigValueValidator,
    ContractValidator,
    OperandPairValidator,
    ParseResult,
    SchemaLoader,
    validate_big_integer_text,
    validate_big_value,
    validate_operand_pair,
)

__all__ = [
    # Constants
    "INVALID_BIG_INTEGER_MESSAGE",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigValueValidator",
    "OperandPairValidator",
    "ParseResult",
    # Functions
    "validate_big_integer_text",
    "validate_big_value",
    "validate_operand_pair",
]
