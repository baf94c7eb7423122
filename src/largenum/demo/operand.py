"""
OperandField — редактируемое поле операнда

Хранит последнее валидное значение BigValue. Правка текстом принимается
только если текст является валидным литералом; иначе сохраняется
предыдущее значение, а ошибка возвращается вызывающему слою в ParseResult.
"""

from typing import Any, Dict, Optional, Union

from loguru import logger

from largenum.core.contracts import ParseResult, validate_big_integer_text, validate_big_value
from largenum.core.domain import BigValue


class OperandField:
    """Поле ввода большого числа (значение по умолчанию 0)."""

    def __init__(self, name: str, initial: Optional[BigValue] = None):
        """
        Args:
            name: Имя поля (для логов и сериализации пары операндов)
            initial: Начальное значение (default: 0)
        """
        self.name = name
        self._value = initial if initial is not None else BigValue.zero()
        self._last_error = ""

    @property
    def value(self) -> BigValue:
        return self._value

    @property
    def last_error(self) -> str:
        """Ошибка последней отклонённой правки ("" после успешной)."""
        return self._last_error

    def edit(self, text: str) -> ParseResult:
        """
        Правка поля текстом.

        Args:
            text: Новый текст

        Returns:
            ParseResult. При is_valid=False значение поля не меняется.
        """
        result = validate_big_integer_text(text)
        if not result.is_valid:
            self._last_error = result.error
            logger.debug(f"Rejected edit of {self.name}: {text!r}")
            return result

        self._value = result.value
        self._last_error = ""
        return result

    def set(self, value: Union[BigValue, int]) -> None:
        self._value = value if isinstance(value, BigValue) else BigValue.of(value)
        self._last_error = ""

    def to_text(self) -> str:
        return self._value.to_string()

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация по контракту big_value."""
        return self._value.model_dump(mode="json")

    @classmethod
    def from_dict(cls, name: str, data: Dict[str, Any]) -> "OperandField":
        """
        Восстановление поля из контракта big_value.

        Raises:
            jsonschema.ValidationError: Если data не соответствует схеме
        """
        validate_big_value(data)
        return cls(name, BigValue.model_validate(data))

    def __repr__(self) -> str:
        return f"OperandField({self.name}={self.to_text()})"
