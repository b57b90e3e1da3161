"""
Decimal Text — десятичная запись величин произвольной длины

Разбор и рендер выполняются блоками по DECIMAL_CHUNK_DIGITS цифр,
поэтому длина записи не ограничена лимитом int <-> str интерпретатора.
Модуль не зависит от контейнера цифр и используется как конвертером
оснований, так и проверкой снимков numeral.
"""

import re
from collections.abc import Iterable
from typing import Final


# Десятичная запись без знака и пробелов (только ASCII цифры)
DECIMAL_PATTERN: Final[re.Pattern] = re.compile(r"[0-9]+", re.ASCII)

# Размер блока десятичных цифр для int <-> str
# Меньше лимита sys.get_int_max_str_digits() (4300 по умолчанию)
DECIMAL_CHUNK_DIGITS: Final[int] = 1000
_DECIMAL_CHUNK: Final[int] = 10**DECIMAL_CHUNK_DIGITS


def fold_digits(digits: Iterable[int], base: int) -> int:
    """Величина цифр от старшей к младшей: result = result * base + digit."""
    result = 0
    for digit in digits:
        result = result * base + digit
    return result


def decimal_to_int(text: str) -> int:
    """
    Разбор десятичной записи любой длины блоками по DECIMAL_CHUNK_DIGITS.

    Raises:
        ValueError: Если text не является десятичной записью
    """
    if DECIMAL_PATTERN.fullmatch(text) is None:
        raise ValueError(f"not a decimal numeral: {text!r}")

    value = 0
    for start in range(0, len(text), DECIMAL_CHUNK_DIGITS):
        chunk = text[start:start + DECIMAL_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def int_to_decimal(value: int) -> str:
    """
    Десятичная запись неотрицательного int любой величины.

    Raises:
        ValueError: Если value < 0
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    if value < _DECIMAL_CHUNK:
        return str(value)

    chunks = []
    while value >= _DECIMAL_CHUNK:
        value, chunk = divmod(value, _DECIMAL_CHUNK)
        chunks.append(str(chunk).zfill(DECIMAL_CHUNK_DIGITS))
    chunks.append(str(value))
    return "".join(reversed(chunks))
