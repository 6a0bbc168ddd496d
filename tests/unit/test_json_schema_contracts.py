"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора digit_sequence:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений типов и диапазона цифр
- Интеграция с Pydantic моделью DigitSequence
"""

import json
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError
from pydantic import ValidationError as PydanticValidationError

from digit_sequence import DigitSequence
from digit_sequence.contracts import (
    ContractValidator,
    DigitSequenceValidator,
    SchemaLoader,
    StrictIntegerValidator,
    validate_digit_sequence,
)

# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_schema_is_valid_draft_2020_12(self) -> None:
        schema = SchemaLoader().load_schema("digit_sequence")

        Draft202012Validator.check_schema(schema)
        assert schema["type"] == "array"
        assert schema["items"] == {"type": "integer", "minimum": 0, "maximum": 9}

    def test_schema_is_cached(self) -> None:
        loader = SchemaLoader()

        assert loader.load_schema("digit_sequence") is loader.load_schema("digit_sequence")

    def test_missing_schema_raises(self) -> None:
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("no_such_contract")

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_raises(self, tmp_path: Path) -> None:
        """Meta-validation отвергает некорректную схему"""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# DIGIT SEQUENCE CONTRACT
# =============================================================================


class TestDigitSequenceContract:
    """Тесты контракта digit_sequence"""

    @pytest.mark.parametrize("data", [[9, 7, 8, 6], [], [0], [0, 0, 3, 0], list(range(10))])
    def test_valid_data(self, data: list[int]) -> None:
        validate_digit_sequence(data)
        assert DigitSequenceValidator().is_valid(data)

    @pytest.mark.parametrize(
        "data",
        [[10], [-1], ["1"], [1.5], [1.0], [0.0], [True], [1, False], {"digits": [1]}, "123", 123, None],
    )
    def test_invalid_data(self, data) -> None:
        with pytest.raises(ValidationError):
            validate_digit_sequence(data)

    def test_iter_errors_reports_every_violation(self) -> None:
        errors = list(DigitSequenceValidator().iter_errors([1, 10, 2, 11]))

        assert len(errors) == 2
        assert sorted(error.instance for error in errors) == [10, 11]

    def test_integral_float_is_not_a_digit(self) -> None:
        """1.0 — integer в draft 2020-12, но не в контракте"""
        assert Draft202012Validator({"type": "integer"}).is_valid(1.0)
        assert not StrictIntegerValidator({"type": "integer"}).is_valid(1.0)
        assert not DigitSequenceValidator().is_valid([1.0])

    def test_describe_violation(self) -> None:
        validator = DigitSequenceValidator()

        assert validator.describe_violation([9, 7, 8, 6]) is None
        assert validator.describe_violation([9, 7, 18]) == (
            "digit_sequence contract violated at $[2]: 18 is greater than the maximum of 9"
        )

    def test_custom_loader(self, tmp_path: Path) -> None:
        (tmp_path / "pair.json").write_text(
            json.dumps({"type": "array", "items": {"type": "integer"}, "maxItems": 2}),
            encoding="utf-8",
        )
        validator = ContractValidator("pair", loader=SchemaLoader(tmp_path))

        assert validator.is_valid([1, 2])
        assert not validator.is_valid([1, 2, 3])
        assert not validator.is_valid([True])


# =============================================================================
# ИНТЕГРАЦИЯ С PYDANTIC
# =============================================================================


class TestPydanticIntegration:
    """Сериализованная модель соответствует контракту"""

    @pytest.mark.parametrize("text", ["", "0", "9786", "000123", "340282366920938463463374607431768211455"])
    def test_serialized_model_matches_contract(self, text: str) -> None:
        payload = json.loads(DigitSequence.from_text(text).to_json())

        validate_digit_sequence(payload)

    def test_contract_valid_payload_loads_into_model(self) -> None:
        payload = [0, 4, 2]
        validate_digit_sequence(payload)

        assert DigitSequence.from_json(json.dumps(payload)) == payload

    @pytest.mark.parametrize("payload", [[True], [1.0], [10], {"digits": [1]}])
    def test_contract_and_model_agree_on_rejection(self, payload) -> None:
        """Контракт и from_json отвергают одни и те же данные"""
        assert not DigitSequenceValidator().is_valid(payload)
        with pytest.raises(PydanticValidationError):
            DigitSequence.from_json(json.dumps(payload))
