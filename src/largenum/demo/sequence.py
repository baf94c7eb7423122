"""Arithmetic demo — четыре операции над двумя операндами.

Последовательность:
1. Sum = num1 + num2
2. Difference = num1 - num2
3. Product = num1 * num2
4. Quotient = num1 / num2 (отсечение к нулю)

Каждый результат форматируется через format_magnitude и пишется в лог.
Нулевой делитель не прерывает последовательность: частное пропускается,
в лог пишется сообщение, остальные операции выполняются независимо.

update() работает как lifecycle gate: вычисления выполняются один раз, до reset().
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from loguru import logger

from largenum.core.contracts import validate_operand_pair
from largenum.core.domain import BigValue, DivisionByZero
from largenum.core.math import DEFAULT_FORMAT_CONFIG, MagnitudeFormatConfig, format_magnitude
from largenum.demo.operand import OperandField


@dataclass(frozen=True)
class DemoConfig:
    """Конфигурация демо-последовательности."""

    divide_by_zero_message: str = "Cannot divide by zero."
    log_level: str = "INFO"
    format_config: MagnitudeFormatConfig = field(default=DEFAULT_FORMAT_CONFIG)


@dataclass(frozen=True)
class OperationResult:
    """Результат одной операции."""

    label: str
    value: BigValue
    formatted: str

    @property
    def log_line(self) -> str:
        return f"{self.label}: {self.formatted}"


@dataclass(frozen=True)
class DemoResult:
    """Результат последовательности из четырёх операций."""

    num1: BigValue
    num2: BigValue

    sum: OperationResult
    difference: OperationResult
    product: OperationResult

    # None при нулевом делителе
    quotient: Optional[OperationResult]
    quotient_skip_reason: str = ""

    @property
    def quotient_skipped(self) -> bool:
        return self.quotient is None

    def operations(self) -> List[OperationResult]:
        results = [self.sum, self.difference, self.product]
        if self.quotient is not None:
            results.append(self.quotient)
        return results


class ArithmeticDemo:
    """Демо-последовательность add/subtract/multiply/divide над двумя полями."""

    def __init__(
        self,
        num1: Optional[OperandField] = None,
        num2: Optional[OperandField] = None,
        config: Optional[DemoConfig] = None,
    ):
        self.num1 = num1 or OperandField("num1")
        self.num2 = num2 or OperandField("num2")
        self.config = config or DemoConfig()

        self._completed = False
        self._last_result: Optional[DemoResult] = None

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def last_result(self) -> Optional[DemoResult]:
        return self._last_result

    def _operation(self, label: str, value: BigValue) -> OperationResult:
        result = OperationResult(
            label=label,
            value=value,
            formatted=format_magnitude(value, self.config.format_config),
        )
        logger.log(self.config.log_level, result.log_line)
        return result

    def evaluate(self, num1: BigValue, num2: BigValue) -> DemoResult:
        """
        Выполнение четырёх операций.

        Args:
            num1: Первый операнд
            num2: Второй операнд (делитель)

        Returns:
            DemoResult; quotient=None если num2 == 0
        """
        sum_result = self._operation("Sum", num1.add(num2))
        difference = self._operation("Difference", num1.subtract(num2))
        product = self._operation("Product", num1.multiply(num2))

        quotient: Optional[OperationResult] = None
        skip_reason = ""
        try:
            quotient = self._operation("Quotient", num1.divide(num2))
        except DivisionByZero:
            skip_reason = self.config.divide_by_zero_message
            logger.log(self.config.log_level, skip_reason)

        return DemoResult(
            num1=num1,
            num2=num2,
            sum=sum_result,
            difference=difference,
            product=product,
            quotient=quotient,
            quotient_skip_reason=skip_reason,
        )

    def update(self) -> Optional[DemoResult]:
        """
        Lifecycle tick: первый вызов выполняет вычисления над текущими полями.

        Returns:
            DemoResult при первом вызове, None при последующих
        """
        if self._completed:
            return None

        self._last_result = self.evaluate(self.num1.value, self.num2.value)
        self._completed = True
        return self._last_result

    def reset(self) -> None:
        """Повторно разрешает вычисления при следующем update()."""
        self._completed = False

    # -------------------------------------------------------------------------
    # Пара операндов (контракт operand_pair)
    # -------------------------------------------------------------------------

    def operands_to_dict(self) -> Dict[str, Any]:
        return {"num1": self.num1.to_text(), "num2": self.num2.to_text()}

    @classmethod
    def from_operands_dict(
        cls, data: Dict[str, Any], config: Optional[DemoConfig] = None
    ) -> "ArithmeticDemo":
        """
        Raises:
            jsonschema.ValidationError: Если data не соответствует operand_pair
        """
        validate_operand_pair(data)
        return cls(
            num1=OperandField("num1", BigValue.parse(data["num1"])),
            num2=OperandField("num2", BigValue.parse(data["num2"])),
            config=config,
        )
