"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- numeral_snapshot.json (снимок numeral: base, digits, decimal)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.decimal_text import decimal_to_int, fold_digits


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Определяем корень проекта (4 уровня вверх от этого файла)
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'numeral_snapshot')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
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

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        for error in self.iter_errors(data):
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return next(iter(self.iter_errors(data)), None) is None

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class NumeralSnapshotValidator(ContractValidator):
    """
    Валидатор для numeral_snapshot контракта.

    Помимо схемы проверяет межполевой инвариант, который JSON Schema
    не выражает: каждая цифра меньше base, а decimal равен
    величине digits.
    """

    def __init__(self):
        super().__init__("numeral_snapshot")

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        schema_errors = list(self.validator.iter_errors(data))
        yield from schema_errors
        if schema_errors:
            return

        base = data["base"]
        digits_valid = True
        for position, digit in enumerate(data["digits"]):
            if digit >= base:
                digits_valid = False
                yield ValidationError(
                    f"digit {digit} at position {position} is invalid for base {base}",
                    path=["digits", position],
                    instance=digit,
                )

        if bool(data["decimal"]) != bool(data["digits"]):
            yield ValidationError(
                "decimal must be empty exactly when digits are empty",
                path=["decimal"],
                instance=data["decimal"],
            )
        elif data["digits"] and digits_valid:
            value = fold_digits(data["digits"], base)
            if decimal_to_int(data["decimal"]) != value:
                yield ValidationError(
                    f"decimal {data['decimal']} does not match digits value {value}",
                    path=["decimal"],
                    instance=data["decimal"],
                )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_numeral_snapshot(data: Dict[str, Any]) -> None:
    """
    Валидация numeral_snapshot данных.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    NumeralSnapshotValidator().validate(data)
