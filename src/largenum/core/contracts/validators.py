"""
Contract Validators — валидация текстового ввода и JSON контрактов

Две формы проверки:
- validate_big_integer_text: чистая функция для поля ввода, возвращает
  ParseResult вместо исключения (решение о правке принимает вызывающий слой)
- JSON Schema контракты сериализованных значений (библиотека jsonschema)

Схемы (schema/ рядом с модулем):
- big_value.json: {"value": "<decimal literal>"}
- operand_pair.json: {"num1": "...", "num2": "..."}
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator

from largenum.core.domain.big_value import BigValue, InvalidFormat


# Сообщение для поля ввода при невалидном литерале
INVALID_BIG_INTEGER_MESSAGE = "Invalid BigInteger value."


# =============================================================================
# TEXT INPUT VALIDATION
# =============================================================================


@dataclass(frozen=True)
class ParseResult:
    """Результат проверки текста поля ввода."""

    is_valid: bool
    text: str
    value: Optional[BigValue]

    # Пусто при успехе
    error: str = ""


def validate_big_integer_text(text: str) -> ParseResult:
    """
    Проверка текста как десятичного литерала BigValue.

    Не бросает исключений для невалидного текста: результат всегда
    возвращается вызывающему слою, который решает, принять ли правку.

    Args:
        text: Текст из поля ввода

    Returns:
        ParseResult(is_valid=True, value=BigValue) или
        ParseResult(is_valid=False, value=None, error=...)
    """
    try:
        value = BigValue.parse(text)
    except InvalidFormat:
        return ParseResult(
            is_valid=False,
            text=text,
            value=None,
            error=f"{INVALID_BIG_INTEGER_MESSAGE} ({text!r})",
        )

    return ParseResult(is_valid=True, text=text, value=value)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'big_value')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class BigValueValidator(ContractValidator):
    """Валидатор для big_value контракта."""

    def __init__(self):
        super().__init__("big_value")


class OperandPairValidator(ContractValidator):
    """Валидатор для operand_pair контракта."""

    def __init__(self):
        super().__init__("operand_pair")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_big_value(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного BigValue.

    Проверяет форму документа, которую модель не проверяет: модель
    подставляет 0 при отсутствии "value", принимает JSON число и
    игнорирует лишние ключи. Контракт требует строку и запрещает лишние ключи.

    Args:
        data: Данные для валидации (например, value.model_dump(mode="json"))

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    BigValueValidator().validate(data)


def validate_operand_pair(data: Dict[str, Any]) -> None:
    """
    Валидация пары операндов.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    OperandPairValidator().validate(data)
