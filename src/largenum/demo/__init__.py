"""Demo — host-side operand fields and the four-operation sequence."""

from .operand import OperandField
from .sequence import ArithmeticDemo, DemoConfig, DemoResult, OperationResult

__all__ = [
    "OperandField",
    "ArithmeticDemo",
    "DemoConfig",
    "DemoResult",
    "OperationResult",
]
