"""
Contract Validation Module

Модуль для валидации JSON контрактов numeral snapshot.
"""

from .validators import (
    ContractValidator,
    NumeralSnapshotValidator,
    SchemaLoader,
    validate_numeral_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NumeralSnapshotValidator",
    # Functions
    "validate_numeral_snapshot",
]
