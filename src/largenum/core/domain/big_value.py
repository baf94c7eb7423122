"""
BigValue — Целое число произвольной точности

Immutable Pydantic модель-обёртка над Python int с каноническим текстовым
представлением. Текстовая форма является единственным форматом хранения значения
(строковое поле в JSON), поэтому parse/to_string обязаны быть взаимно
обратными для любого значения, включая 0 и отрицательные числа.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. BigValue.parse(v.to_string()) == v для любого v
2. to_string() каноничен: без ведущих нулей (кроме "0"), без "+", "-" для отрицательных
3. parse принимает только [+-]?[0-9]+ (без пробелов, разделителей, дробной части)
4. divide() отсекает к нулю; деление на ноль → DivisionByZero (никаких fallback)
5. Экземпляры неизменяемы: арифметика всегда создаёт новое значение
"""

import re
from functools import total_ordering
from typing import Final, Union

from pydantic import BaseModel, Field, StrictInt, field_serializer, field_validator


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Допустимый десятичный литерал: необязательный знак и только ASCII цифры
DECIMAL_LITERAL_PATTERN: Final[str] = r"[+-]?[0-9]+"

_DECIMAL_LITERAL_RE: Final[re.Pattern[str]] = re.compile(DECIMAL_LITERAL_PATTERN)

# Размер блока цифр для конверсии str <-> int.
# Интерпретатор ограничивает прямую конверсию (sys.int_info.default_max_str_digits),
# блоки по 1000 цифр всегда ниже этого лимита.
DIGIT_CHUNK_SIZE: Final[int] = 1000

_CHUNK_BASE: Final[int] = 10**DIGIT_CHUNK_SIZE


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidFormat(ValueError):
    """
    Текст не является десятичным целым литералом.

    Вызывающая сторона (поле ввода) должна отклонить правку и сохранить
    предыдущее валидное значение.
    """

    def __init__(self, text: object):
        self.text = text
        super().__init__(f"Invalid BigInteger literal: {text!r}")


class DivisionByZero(ZeroDivisionError):
    """
    Деление BigValue на ноль.

    Восстановимая ситуация: вызывающий код пропускает частное,
    остальные операции выполняются независимо.
    """

    def __init__(self, dividend: int):
        self.dividend = dividend
        super().__init__("Cannot divide by zero.")


# =============================================================================
# КОНВЕРСИЯ TEXT <-> INT
# =============================================================================


def _digits_to_int(digits: str) -> int:
    """Конверсия строки цифр в int блоками (без лимита длины)."""
    if len(digits) <= DIGIT_CHUNK_SIZE:
        return int(digits)

    result = 0
    for start in range(0, len(digits), DIGIT_CHUNK_SIZE):
        chunk = digits[start : start + DIGIT_CHUNK_SIZE]
        result = result * 10 ** len(chunk) + int(chunk)
    return result


def _int_to_digits(value: int) -> str:
    """Каноническая десятичная запись int (блоками для очень длинных значений)."""
    if value < 0:
        return "-" + _int_to_digits(-value)
    if value < _CHUNK_BASE:
        return str(value)

    chunks = []
    while value:
        value, remainder = divmod(value, _CHUNK_BASE)
        chunks.append(remainder)

    head = str(chunks[-1])
    tail = "".join(str(chunk).zfill(DIGIT_CHUNK_SIZE) for chunk in reversed(chunks[:-1]))
    return head + tail


def parse_decimal_literal(text: object) -> int:
    """
    Строгий разбор десятичного литерала.

    Args:
        text: Исходный текст (ожидается str)

    Returns:
        Целое значение литерала

    Raises:
        InvalidFormat: Если text не str или не соответствует [+-]?[0-9]+

    Examples:
        >>> parse_decimal_literal("-00042")
        -42
        >>> parse_decimal_literal("+7")
        7
    """
    if not isinstance(text, str) or _DECIMAL_LITERAL_RE.fullmatch(text) is None:
        raise InvalidFormat(text)

    sign = -1 if text[0] == "-" else 1
    digits = text.lstrip("+-")
    return sign * _digits_to_int(digits)


def _truncated_divide(dividend: int, divisor: int) -> int:
    """Целочисленное деление с отсечением к нулю (а не floor, как у Python //)."""
    if divisor == 0:
        raise DivisionByZero(dividend)

    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


# =============================================================================
# BIGVALUE MODEL
# =============================================================================

Operand = Union["BigValue", int]


@total_ordering
class BigValue(BaseModel):
    """
    Целое число произвольной точности со знаком.

    Immutable модель (frozen=True). Сравнение и равенство определены
    на представляемом целом, не на промежуточной строке:
    BigValue.of(5) == BigValue.parse("+005") == 5.

    В JSON значение сериализуется строкой: {"value": "-123"}.
    """

    value: StrictInt = Field(0, description="Целое значение произвольной точности")

    model_config = {"frozen": True}  # Immutable

    @field_validator("value", mode="before")
    @classmethod
    def coerce_decimal_literal(cls, v: object) -> object:
        """Строки принимаются только как строгие десятичные литералы."""
        if isinstance(v, str):
            return parse_decimal_literal(v)
        return v

    @field_serializer("value", when_used="json")
    def serialize_value(self, v: int) -> str:
        return _int_to_digits(v)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, value: int) -> "BigValue":
        """Создание из целого литерала."""
        return cls(value=value)

    @classmethod
    def zero(cls) -> "BigValue":
        return cls(value=0)

    @classmethod
    def parse(cls, text: str) -> "BigValue":
        """
        Разбор десятичного литерала.

        Args:
            text: Литерал вида [+-]?[0-9]+

        Returns:
            Новый BigValue

        Raises:
            InvalidFormat: Если text не является валидным литералом
        """
        return cls(value=parse_decimal_literal(text))

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """
        Каноническое десятичное представление.

        Returns:
            "0", "123" или "-123" (без ведущих нулей и без "+")
        """
        return _int_to_digits(self.value)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigValue({self.to_string()})"

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    @property
    def sign(self) -> int:
        """-1, 0 или +1."""
        return (self.value > 0) - (self.value < 0)

    def is_zero(self) -> bool:
        return self.value == 0

    def __eq__(self, other: object) -> bool:
        other_value = _operand_value(other)
        if other_value is NotImplemented:
            return NotImplemented
        return self.value == other_value

    def __lt__(self, other: object) -> bool:
        other_value = _operand_value(other)
        if other_value is NotImplemented:
            return NotImplemented
        return self.value < other_value

    def __hash__(self) -> int:
        return hash(self.value)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: Operand) -> "BigValue":
        return BigValue(value=self.value + _require_operand(other))

    def subtract(self, other: Operand) -> "BigValue":
        return BigValue(value=self.value - _require_operand(other))

    def multiply(self, other: Operand) -> "BigValue":
        return BigValue(value=self.value * _require_operand(other))

    def divide(self, other: Operand) -> "BigValue":
        """
        Целочисленное деление с отсечением к нулю.

        Отличается от Python //: BigValue.of(-7).divide(2) == -3 (а не -4).

        Raises:
            DivisionByZero: Если делитель равен нулю
        """
        return BigValue(value=_truncated_divide(self.value, _require_operand(other)))

    def __add__(self, other: object) -> "BigValue":
        other_value = _operand_value(other)
        if other_value is NotImplemented:
            return NotImplemented
        return BigValue(value=self.value + other_value)

    __radd__ = __add__

    def __sub__(self, other: object) -> "BigValue":
        other_value = _operand_value(other)
        if other_value is NotImplemented:
            return NotImplemented
        return BigValue(value=self.value - other_value)

    def __rsub__(self, other: object) -> "BigValue":
        other_value = _operand_value(other)
        if other_value is NotImplemented:
            return NotImplemented
        return BigValue(value=other_value - self.value)

    def __mul__(self, other: object) -> "BigValue":
        other_value = _operand_value(other)
        if other_value is NotImplemented:
            return NotImplemented
        return BigValue(value=self.value * other_value)

    __rmul__ = __mul__

    def __floordiv__(self, other: object) -> "BigValue":
        # Семантика divide(): отсечение к нулю
        other_value = _operand_value(other)
        if other_value is NotImplemented:
            return NotImplemented
        return BigValue(value=_truncated_divide(self.value, other_value))

    def __rfloordiv__(self, other: object) -> "BigValue":
        other_value = _operand_value(other)
        if other_value is NotImplemented:
            return NotImplemented
        return BigValue(value=_truncated_divide(other_value, self.value))

    def __neg__(self) -> "BigValue":
        return BigValue(value=-self.value)

    def __abs__(self) -> "BigValue":
        return BigValue(value=abs(self.value))

    def __int__(self) -> int:
        return self.value


# =============================================================================
# HELPERS
# =============================================================================


def _operand_value(other: object):
    """int значение операнда или NotImplemented для чужих типов (bool исключён)."""
    if isinstance(other, BigValue):
        return other.value
    if isinstance(other, int) and not isinstance(other, bool):
        return other
    return NotImplemented


def _require_operand(other: object) -> int:
    other_value = _operand_value(other)
    if other_value is NotImplemented:
        raise TypeError(f"Unsupported operand type for BigValue: {type(other).__name__}")
    return other_value
