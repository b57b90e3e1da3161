"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора numeral_snapshot:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей и типов
- Детекция нарушений constraints (min/max/pattern)
- Межполевой инвариант digit < base
- Совпадение decimal с величиной digits
- Интеграция с Pydantic моделью и Numeral
"""

import json

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.core.contracts import (
    NumeralSnapshotValidator,
    SchemaLoader,
    validate_numeral_snapshot,
)
from src.core.domain import NumeralSnapshot
from src.numeral import Numeral


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_snapshot():
    """Валидный numeral_snapshot для тестирования."""
    return {
        "base": 2,
        "digits": [1, 1, 0, 1],
        "decimal": "13",
    }


@pytest.fixture
def validator():
    return NumeralSnapshotValidator()


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestSchemaLoader:
    """Загрузка и meta-validation схем."""

    def test_schema_is_valid_draft_2020_12(self):
        schema = SchemaLoader().load_schema("numeral_snapshot")
        Draft202012Validator.check_schema(schema)

    def test_schema_file_is_json(self):
        loader = SchemaLoader()
        with open(loader.schema_dir / "numeral_snapshot.json", "r", encoding="utf-8") as f:
            assert json.load(f)["title"] == "NumeralSnapshot"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("numeral_snapshot") is loader.load_schema("numeral_snapshot")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")


# =============================================================================
# VALIDATION
# =============================================================================


class TestNumeralSnapshotContract:
    """Валидация numeral_snapshot."""

    def test_valid(self, validator, valid_snapshot):
        validator.validate(valid_snapshot)
        assert validator.is_valid(valid_snapshot)
        validate_numeral_snapshot(valid_snapshot)

    def test_valid_empty(self, validator):
        assert validator.is_valid({"base": 3, "digits": [], "decimal": ""})

    @pytest.mark.parametrize("field", ["base", "digits", "decimal"])
    def test_missing_required(self, validator, valid_snapshot, field):
        del valid_snapshot[field]
        with pytest.raises(ValidationError):
            validator.validate(valid_snapshot)

    def test_additional_property(self, validator, valid_snapshot):
        valid_snapshot["sign"] = "-"
        assert not validator.is_valid(valid_snapshot)

    @pytest.mark.parametrize("base", [1, 37, "2", 2.5])
    def test_bad_base(self, validator, valid_snapshot, base):
        valid_snapshot["base"] = base
        assert not validator.is_valid(valid_snapshot)

    def test_bad_decimal_pattern(self, validator, valid_snapshot):
        valid_snapshot["decimal"] = "-13"
        assert not validator.is_valid(valid_snapshot)

    def test_digit_not_below_base(self, validator, valid_snapshot):
        """Схема допускает 0..35, но цифра должна быть меньше base."""
        valid_snapshot["digits"] = [1, 2, 0, 1]
        with pytest.raises(ValidationError, match="invalid for base 2"):
            validator.validate(valid_snapshot)

    def test_iter_errors_reports_every_digit(self, validator):
        data = {"base": 2, "digits": [2, 1, 3], "decimal": "1"}
        errors = list(validator.iter_errors(data))
        assert [list(error.path) for error in errors] == [["digits", 0], ["digits", 2]]

    def test_decimal_value_mismatch(self, validator, valid_snapshot):
        valid_snapshot["decimal"] = "99"
        assert not validator.is_valid(valid_snapshot)
        with pytest.raises(ValidationError, match="does not match digits value 13"):
            validator.validate(valid_snapshot)

    def test_decimal_value_skipped_when_digits_invalid(self, validator):
        """Величина не сверяется, пока цифры не валидны для base."""
        errors = list(validator.iter_errors({"base": 2, "digits": [2], "decimal": "99"}))
        assert [list(error.path) for error in errors] == [["digits", 0]]

    def test_decimal_presence(self, validator):
        assert not validator.is_valid({"base": 2, "digits": [], "decimal": "0"})
        assert not validator.is_valid({"base": 2, "digits": [0], "decimal": ""})


# =============================================================================
# INTEGRATION
# =============================================================================


class TestPydanticIntegration:
    """Pydantic модель и Numeral производят данные, удовлетворяющие схеме."""

    @pytest.mark.parametrize("text", ["0", "13", "123456789012345678901234567890", "-1"])
    def test_numeral_snapshot_matches_contract(self, validator, text):
        snapshot = Numeral.from_decimal(text, 3).to_snapshot()
        validator.validate(snapshot.model_dump())

    def test_contract_data_loads_into_model(self, valid_snapshot):
        snapshot = NumeralSnapshot.model_validate(valid_snapshot)
        assert Numeral.from_snapshot(snapshot).to_decimal_string() == "13"
