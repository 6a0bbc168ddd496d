"""
Wire Contract — JSON-формат сохранённой DigitSequence

Сохранённая DigitSequence — JSON-массив цифр, например [9, 7, 8, 6].
Правило формата задано JSON Schema (schema/digit_sequence.json) и проверяется
библиотекой jsonschema. DigitSequence.from_json проходит через этот же
контракт, поэтому формат описан в одном месте.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Элемент массива — JSON integer в [0, 9]
2. true/false не являются цифрами
3. 1.0 не является цифрой (draft 2020-12 считает его integer, контракт — нет)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match
from jsonschema.validators import extend


# =============================================================================
# STRICT INTEGER DIALECT
# =============================================================================


def _is_strict_integer(checker: Any, instance: Any) -> bool:
    return isinstance(instance, int) and not isinstance(instance, bool)


# Draft 2020-12, в котором "integer" совпадает с JSON-литералом без дробной части
StrictIntegerValidator = extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer),
)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик схем, поставляемых внутри пакета (contracts/schema/).

    Каждая схема проходит meta-validation один раз и кэшируется.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени без расширения (например, 'digit_sequence').

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            StrictIntegerValidator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка разобранного JSON против схемы пакета (строгие integer)."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = StrictIntegerValidator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            jsonschema.ValidationError: Наиболее релевантное нарушение контракта
        """
        error = best_match(self.validator.iter_errors(data))
        if error is not None:
            raise error

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[jsonschema.ValidationError]:
        return self.validator.iter_errors(data)

    def describe_violation(self, data: Any) -> str | None:
        """
        Описание нарушения для сообщений об ошибках.

        Returns:
            None для валидных данных, иначе строка вида
            "digit_sequence contract violated at $[2]: 18 is greater than the maximum of 9"
        """
        error = best_match(self.validator.iter_errors(data))
        if error is None:
            return None
        return f"{self.schema_name} contract violated at {error.json_path}: {error.message}"


class DigitSequenceValidator(ContractValidator):
    """Контракт сохранённой DigitSequence."""

    def __init__(self):
        super().__init__("digit_sequence")


def validate_digit_sequence(data: Any) -> None:
    """
    Проверка уже разобранного JSON-массива цифр, например [9, 7, 8, 6].

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют контракту
    """
    DigitSequenceValidator().validate(data)
