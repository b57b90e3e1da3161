"""
Domain models and value objects.

Contains the digit container (DigitList), its cursor, error hierarchy,
base settings and the serializable numeral snapshot.
"""

from src.core.domain.errors import (
    DigitListError,
    IndexOutOfRange,
    InvalidDigit,
    IteratorMisuse,
    TypeMismatch,
)
from src.core.domain.settings import (
    DEFAULT_SETTINGS,
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    NumeralSettings,
    validate_base,
)
from src.core.domain.digit_list import NIL, DigitList
from src.core.domain.cursor import CursorState, DigitCursor
from src.core.domain.snapshot import NumeralSnapshot

__all__ = [
    # Errors
    "DigitListError",
    "IndexOutOfRange",
    "InvalidDigit",
    "IteratorMisuse",
    "TypeMismatch",
    # Settings
    "DEFAULT_SETTINGS",
    "DIGIT_ALPHABET",
    "MAX_BASE",
    "MIN_BASE",
    "NumeralSettings",
    "validate_base",
    # Digit container
    "NIL",
    "DigitList",
    "CursorState",
    "DigitCursor",
    # Snapshot model
    "NumeralSnapshot",
]
