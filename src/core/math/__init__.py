"""
Core math modules

Перевод между основаниями и перестановки цифр на месте.
"""

# Base Conversion
from src.core.math.base_conversion import (
    DECIMAL_CHUNK_DIGITS,
    DECIMAL_PATTERN,
    change_base,
    decimal_to_int,
    from_magnitude,
    int_to_decimal,
    parse_decimal,
    render_decimal,
    to_magnitude,
)

# Sequence Operations
from src.core.math.sequence_ops import (
    shift_left,
    shift_right,
    sort_ascending,
    sort_descending,
    swap,
)

__all__ = [
    # Base Conversion — Constants
    "DECIMAL_CHUNK_DIGITS",
    "DECIMAL_PATTERN",
    # Base Conversion — Functions
    "change_base",
    "decimal_to_int",
    "from_magnitude",
    "int_to_decimal",
    "parse_decimal",
    "render_decimal",
    "to_magnitude",
    # Sequence Operations
    "shift_left",
    "shift_right",
    "sort_ascending",
    "sort_descending",
    "swap",
]
