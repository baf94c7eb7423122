"""
Тесты для BigValue

Проверяет:
1. Строгий разбор десятичных литералов (InvalidFormat)
2. Каноническую сериализацию и round-trip parse/to_string
3. Арифметику, включая деление с отсечением к нулю
4. DivisionByZero без подстановки fallback
5. Равенство, порядок и хеш на уровне целого значения
6. Immutability (frozen=True) и JSON сериализацию
7. Значения длиннее лимита конверсии int <-> str
"""

import json

import pytest
from pydantic import ValidationError

from largenum.core.domain import (
    DIGIT_CHUNK_SIZE,
    BigValue,
    DivisionByZero,
    InvalidFormat,
    parse_decimal_literal,
)


# =============================================================================
# PARSE
# =============================================================================


class TestParse:
    """Тесты для BigValue.parse"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", 0),
            ("7", 7),
            ("-7", -7),
            ("+7", 7),
            ("000123", 123),
            ("-000", 0),
            ("1000000", 1_000_000),
        ],
    )
    def test_valid_literals(self, text: str, expected: int) -> None:
        """Валидные литералы разбираются в правильное значение"""
        assert BigValue.parse(text).value == expected

    @pytest.mark.parametrize(
        "text",
        ["", " ", " 12", "12 ", "1_000", "1,000", "1.5", "1e6", "--1", "+-1", "-", "abc", "12\n", "٣"],
    )
    def test_invalid_literals_raise(self, text: str) -> None:
        """Пробелы, разделители, дробная часть и не-ASCII цифры отклоняются"""
        with pytest.raises(InvalidFormat):
            BigValue.parse(text)

    def test_non_string_raises(self) -> None:
        """Не-строковый ввод отклоняется"""
        with pytest.raises(InvalidFormat):
            parse_decimal_literal(None)  # type: ignore[arg-type]
        with pytest.raises(InvalidFormat):
            parse_decimal_literal(12)  # type: ignore[arg-type]

    def test_invalid_format_is_value_error(self) -> None:
        """InvalidFormat наследует ValueError и хранит исходный текст"""
        with pytest.raises(ValueError) as exc_info:
            BigValue.parse("12a")
        assert isinstance(exc_info.value, InvalidFormat)
        assert exc_info.value.text == "12a"

    def test_model_validation_of_bad_string(self) -> None:
        """Невалидная строка при конструировании модели → ValidationError"""
        with pytest.raises(ValidationError):
            BigValue(value="1.5")

    def test_model_rejects_float_and_bool(self) -> None:
        """StrictInt: float и bool не принимаются"""
        with pytest.raises(ValidationError):
            BigValue(value=1.0)
        with pytest.raises(ValidationError):
            BigValue(value=True)


# =============================================================================
# SERIALIZATION
# =============================================================================


class TestToString:
    """Тесты для to_string и round-trip"""

    def test_canonical_form(self) -> None:
        """Ведущие нули и '+' удаляются"""
        assert BigValue.parse("+000123").to_string() == "123"
        assert BigValue.parse("-0042").to_string() == "-42"
        assert BigValue.parse("-0").to_string() == "0"
        assert BigValue.zero().to_string() == "0"

    def test_str_matches_to_string(self) -> None:
        value = BigValue.of(-987654321)
        assert str(value) == value.to_string() == "-987654321"
        assert repr(value) == "BigValue(-987654321)"

    @pytest.mark.parametrize(
        "value",
        [0, 1, -1, 999, -1000, 10**18, -(10**30) + 7, 2**256 - 1],
    )
    def test_round_trip(self, value: int) -> None:
        """parse(to_string(v)) == v"""
        original = BigValue.of(value)
        assert BigValue.parse(original.to_string()) == original

    def test_json_serializes_value_as_string(self) -> None:
        """В JSON значение хранится строкой"""
        value = BigValue.of(-123)
        payload = json.loads(value.model_dump_json())
        assert payload == {"value": "-123"}
        assert value.model_dump() == {"value": -123}

    def test_json_round_trip(self) -> None:
        value = BigValue.of(10**40 + 1)
        assert BigValue.model_validate_json(value.model_dump_json()) == value


class TestLongValues:
    """Значения длиннее лимита прямой конверсии int <-> str"""

    def test_long_literal_round_trip(self) -> None:
        digits = "9" + "0123456789" * 600 + "1"
        value = BigValue.parse(digits)
        assert value.to_string() == digits
        assert BigValue.parse("-" + digits).to_string() == "-" + digits

    def test_chunk_boundary_preserves_inner_zeros(self) -> None:
        """Внутренние блоки из нулей не теряются"""
        value = BigValue.of(10 ** (DIGIT_CHUNK_SIZE * 3))
        text = value.to_string()
        assert text == "1" + "0" * (DIGIT_CHUNK_SIZE * 3)
        assert BigValue.parse(text) == value

    def test_long_leading_zeros(self) -> None:
        text = "0" * (DIGIT_CHUNK_SIZE + 5) + "42"
        assert BigValue.parse(text).value == 42


# =============================================================================
# ARITHMETIC
# =============================================================================


class TestArithmetic:
    """Тесты для add/subtract/multiply/divide"""

    def test_basic_operations(self) -> None:
        a = BigValue.of(1_000_000)
        b = BigValue.of(3)
        assert a.add(b) == BigValue.of(1_000_003)
        assert a.subtract(b) == BigValue.of(999_997)
        assert a.multiply(b) == BigValue.of(3_000_000)
        assert a.divide(b) == BigValue.of(333_333)

    def test_operators_match_methods(self) -> None:
        a = BigValue.of(-17)
        b = BigValue.of(5)
        assert a + b == a.add(b)
        assert a - b == a.subtract(b)
        assert a * b == a.multiply(b)
        assert a // b == a.divide(b)
        assert -a == BigValue.of(17)
        assert abs(a) == BigValue.of(17)

    def test_int_operands(self) -> None:
        """Операторы принимают int с обеих сторон"""
        a = BigValue.of(10)
        assert a + 5 == 15
        assert 5 + a == 15
        assert 5 - a == -5
        assert 3 * a == 30
        assert 100 // a == 10
        assert isinstance(5 + a, BigValue)

    @pytest.mark.parametrize(
        "dividend, divisor, expected",
        [
            (7, 2, 3),
            (-7, 2, -3),
            (7, -2, -3),
            (-7, -2, 3),
            (1, 3, 0),
            (-1, 3, 0),
            (0, -5, 0),
        ],
    )
    def test_divide_truncates_toward_zero(self, dividend: int, divisor: int, expected: int) -> None:
        """Деление отсекает к нулю, а не к -inf"""
        result = BigValue.of(dividend).divide(BigValue.of(divisor))
        assert result.value == expected

    def test_divide_by_zero_raises(self) -> None:
        """Деление на ноль → DivisionByZero, без fallback"""
        with pytest.raises(DivisionByZero):
            BigValue.of(5).divide(BigValue.zero())
        with pytest.raises(ZeroDivisionError):
            BigValue.of(5) // 0
        with pytest.raises(DivisionByZero):
            5 // BigValue.zero()

    def test_add_then_subtract_restores(self) -> None:
        a = BigValue.parse("123456789012345678901234567890")
        b = BigValue.parse("-98765432109876543210")
        assert a.add(b).subtract(b) == a

    def test_multiply_then_divide_restores(self) -> None:
        a = BigValue.parse("-123456789012345678901234567890")
        b = BigValue.parse("98765432109876543210")
        assert a.multiply(b).divide(b) == a

    def test_arithmetic_returns_new_instances(self) -> None:
        a = BigValue.of(1)
        b = a.add(BigValue.zero())
        assert a == b
        assert a is not b

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            BigValue.of(1).add(1.5)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            BigValue.of(1) + "1"  # type: ignore[operator]


# =============================================================================
# COMPARISON & IMMUTABILITY
# =============================================================================


class TestComparison:
    """Тесты для равенства, порядка и знака"""

    def test_equality_is_structural(self) -> None:
        assert BigValue.parse("+0005") == BigValue.of(5)
        assert BigValue.of(5) == 5
        assert BigValue.of(5) != BigValue.of(-5)
        assert BigValue.of(1) != True  # noqa: E712

    def test_ordering(self) -> None:
        values = [BigValue.of(v) for v in (3, -10, 0, 10**20)]
        assert sorted(values) == [BigValue.of(v) for v in (-10, 0, 3, 10**20)]
        assert BigValue.of(2) > 1
        assert BigValue.of(2) <= BigValue.of(2)

    def test_hash_consistent_with_equality(self) -> None:
        assert hash(BigValue.parse("007")) == hash(BigValue.of(7))
        assert len({BigValue.of(7), BigValue.parse("+7"), BigValue.of(8)}) == 2

    def test_zero_and_sign(self) -> None:
        assert BigValue.zero().is_zero()
        assert BigValue.parse("-0").is_zero()
        assert not BigValue.of(-1).is_zero()
        assert BigValue.of(-3).sign == -1
        assert BigValue.zero().sign == 0
        assert BigValue.of(3).sign == 1
        assert int(BigValue.of(-3)) == -3

    def test_frozen(self) -> None:
        """Изменение поля запрещено"""
        value = BigValue.of(1)
        with pytest.raises(ValidationError):
            value.value = 2  # type: ignore[misc]
