"""
Magnitude Formatter — Человекочитаемое представление больших чисел

Отображение BigValue в строку вида "1.23 Million":
- Количество десятичных цифр |v| определяет показатель группы (степень 1000)
- Показатель определяет суффикс short-scale из фиксированной таблицы (до "Googol")
- Значение масштабируется на 1000^exponent и округляется до 2 знаков

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. format_magnitude(0) == "0" (отдельный случай, без суффикса и точки)
2. Знак не влияет на выбор показателя; знак остаётся на числе, не на суффиксе
3. Показатель за пределами таблицы → пустой суффикс (не ошибка)
4. Масштабирование точное, округление выполняется один раз;
   результат используется только для отображения

ФОРМУЛЫ:
    digit_count = len(decimal digits of |v|)
    exponent = (digit_count - 1) // 3
    suffix = SUFFIXES.get(exponent * 3, "")
    scaled = round_half_up(v / 1000^exponent, 2)
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from types import MappingProxyType
from typing import Final, Mapping, NamedTuple, Optional, Union

from largenum.core.domain.big_value import BigValue


# =============================================================================
# SUFFIX TABLE
# =============================================================================

# Показатель степени 10 → название short-scale (с ведущим пробелом).
# Показатель 0 отсутствует: числа < 1000 выводятся без суффикса.
# 100 (Googol) не кратен 3 и поэтому недостижим через digit-count lookup,
# но остаётся доступен через suffix_for(100).
SUFFIXES: Final[Mapping[int, str]] = MappingProxyType(
    {
        3: " Thousand",
        6: " Million",
        9: " Billion",
        12: " Trillion",
        15: " Quadrillion",
        18: " Quintillion",
        21: " Sextillion",
        24: " Septillion",
        27: " Octillion",
        30: " Nonillion",
        33: " Decillion",
        36: " Undecillion",
        39: " Duodecillion",
        42: " Tredecillion",
        45: " Quattuordecillion",
        48: " Quindecillion",
        51: " Sexdecillion",
        54: " Septendecillion",
        57: " Octodecillion",
        60: " Novemdecillion",
        63: " Vigintillion",
        66: " Unvigintillion",
        69: " Duovigintillion",
        72: " Trevigintillion",
        75: " Quattuorvigintillion",
        78: " Quinvigintillion",
        81: " Sexvigintillion",
        84: " Septenvigintillion",
        87: " Octovigintillion",
        90: " Novemvigintillion",
        93: " Trigintillion",
        96: " Untrigintillion",
        99: " Duotrigintillion",
        100: " Googol",
    }
)

# Размер группы разрядов (short scale: тысяча = 10^3)
GROUP_DIGITS: Final[int] = 3

# Количество знаков после запятой по умолчанию
DISPLAY_DECIMALS_DEFAULT: Final[int] = 2

# Минимальная точность контекста Decimal при масштабировании
DISPLAY_PRECISION_DEFAULT: Final[int] = 28

_LOG10_2: Final[float] = math.log10(2)


# =============================================================================
# CONFIG & RESULT TYPES
# =============================================================================


@dataclass(frozen=True)
class MagnitudeFormatConfig:
    """Конфигурация отображения.

    - decimals: знаков после запятой при округлении
    - rounding: режим округления decimal (ROUND_HALF_UP = половина от нуля)
    - precision: минимальная точность контекста Decimal (поднимается до числа цифр значения)
    """

    decimals: int = DISPLAY_DECIMALS_DEFAULT
    rounding: str = ROUND_HALF_UP
    precision: int = DISPLAY_PRECISION_DEFAULT

    def __post_init__(self) -> None:
        if self.decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {self.decimals}")
        # Масштабированное значение < 1000 (+ перенос при округлении)
        min_precision = GROUP_DIGITS + 1 + self.decimals
        if self.precision < min_precision:
            raise ValueError(
                f"precision must be at least {min_precision} for "
                f"{self.decimals} decimals, got {self.precision}"
            )


DEFAULT_FORMAT_CONFIG: Final[MagnitudeFormatConfig] = MagnitudeFormatConfig()


class FormattedMagnitude(NamedTuple):
    """Результат форматирования: округлённое значение и суффикс."""

    value: Decimal
    suffix: str
    exponent: int

    def __str__(self) -> str:
        return _plain_decimal(self.value) + self.suffix


# =============================================================================
# DIGIT COUNT & EXPONENT
# =============================================================================


def _as_int(value: Union[BigValue, int]) -> int:
    if isinstance(value, BigValue):
        return value.value
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise TypeError(f"Expected BigValue or int, got {type(value).__name__}")


def digit_count(value: Union[BigValue, int]) -> int:
    """
    Количество десятичных цифр |value| (знак не учитывается).

    Считается через bit_length без конверсии в строку, поэтому работает
    для значений любой длины.

    Args:
        value: BigValue или int

    Returns:
        Количество цифр (для 0 → 1)

    Examples:
        >>> digit_count(0)
        1
        >>> digit_count(-1000)
        4
        >>> digit_count(10**150)
        151
    """
    magnitude = abs(_as_int(value))
    if magnitude == 0:
        return 1

    # Нижняя оценка: 2^(bits-1) <= magnitude
    count = int((magnitude.bit_length() - 1) * _LOG10_2) + 1
    while count > 1 and 10 ** (count - 1) > magnitude:
        count -= 1
    while 10**count <= magnitude:
        count += 1
    return count


def magnitude_exponent(value: Union[BigValue, int]) -> int:
    """
    Показатель группы: floor((digit_count - 1) / 3).

    1-3 цифры → 0, 4-6 → 1 (Thousand), 7-9 → 2 (Million), ...
    """
    return (digit_count(value) - 1) // GROUP_DIGITS


def suffix_for(power_of_ten: int) -> str:
    """
    Суффикс для степени 10.

    Args:
        power_of_ten: Степень 10 (3, 6, ..., 99, 100)

    Returns:
        Суффикс с ведущим пробелом или "" если степени нет в таблице
    """
    return SUFFIXES.get(power_of_ten, "")


# =============================================================================
# FORMATTING
# =============================================================================


def _plain_decimal(value: Decimal) -> str:
    """Decimal без экспоненты и без хвостовых нулей дробной части (1.50 → "1.5")."""
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def compute_magnitude(
    value: Union[BigValue, int],
    config: Optional[MagnitudeFormatConfig] = None,
) -> FormattedMagnitude:
    """
    Масштабирование значения и выбор суффикса.

    Алгоритм:
    1. 0 → FormattedMagnitude(0, "", 0)
    2. exponent = (digit_count(|v|) - 1) // 3
    3. suffix = SUFFIXES.get(exponent * 3, "")
    4. scaled = v / 1000^exponent в Decimal (точно, без промежуточного округления)
    5. Единственное округление до decimals знаков (config.rounding)

    Показатель выбирается до округления, поэтому 999_999 → 1000.00 Thousand.

    Args:
        value: BigValue или int
        config: Конфигурация (default: 2 знака, ROUND_HALF_UP, 28 цифр)

    Returns:
        FormattedMagnitude
    """
    cfg = config or DEFAULT_FORMAT_CONFIG
    number = _as_int(value)

    if number == 0:
        return FormattedMagnitude(value=Decimal(0), suffix="", exponent=0)

    exponent = magnitude_exponent(number)
    suffix = suffix_for(exponent * GROUP_DIGITS)

    with localcontext() as ctx:
        # Точности хватает на все цифры числа: scaleb точен, округление одно (quantize)
        ctx.prec = max(cfg.precision, digit_count(number) + cfg.decimals)
        ctx.rounding = cfg.rounding
        scaled = Decimal(number).scaleb(-GROUP_DIGITS * exponent)
        rounded = scaled.quantize(Decimal(1).scaleb(-cfg.decimals), rounding=cfg.rounding)

    return FormattedMagnitude(value=rounded, suffix=suffix, exponent=exponent)


def format_magnitude(
    value: Union[BigValue, int],
    config: Optional[MagnitudeFormatConfig] = None,
) -> str:
    """
    Человекочитаемое представление большого числа.

    Args:
        value: BigValue или int
        config: Конфигурация отображения

    Returns:
        Строка вида "1.23 Million", "-1 Million", "999" или "0"

    Examples:
        >>> format_magnitude(0)
        '0'
        >>> format_magnitude(999)
        '999'
        >>> format_magnitude(1000)
        '1 Thousand'
        >>> format_magnitude(1_234_567)
        '1.23 Million'
        >>> format_magnitude(-1_000_000)
        '-1 Million'
    """
    if _as_int(value) == 0:
        return "0"
    return str(compute_magnitude(value, config))
