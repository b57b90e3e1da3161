"""
Base Conversion — перевод между magnitude и последовательностью цифр

Модуль обеспечивает точный перевод произвольной величины:
- to_magnitude: свёртка цифр от head к tail: result = result * base + digit
- from_magnitude: повторное деление divmod(value, base), остаток становится
  новым head (порядок от старшей цифры без финального разворота)
- parse_decimal / render_decimal: десятичный текст ↔ последовательность

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. to_magnitude(from_magnitude(v, b)) == v для любого v >= 0 и основания b
2. Отрицательная величина → пустая последовательность (не исключение)
3. Ноль → одна цифра 0 (каноничный ноль)
4. Переполнение невозможно: int в Python произвольной точности
"""

import logging
from typing import Optional

from src.core.domain.decimal_text import (
    DECIMAL_CHUNK_DIGITS,
    DECIMAL_PATTERN,
    decimal_to_int,
    fold_digits,
    int_to_decimal,
)
from src.core.domain.digit_list import DigitList
from src.core.domain.settings import validate_base

logger = logging.getLogger(__name__)


# =============================================================================
# MAGNITUDE ↔ DIGITS
# =============================================================================


def to_magnitude(sequence: DigitList) -> int:
    """
    Величина последовательности цифр.

    Args:
        sequence: Цифры от старшей к младшей

    Returns:
        Неотрицательное целое; 0 для пустой последовательности

    Examples:
        >>> to_magnitude(DigitList(2, [1, 1, 0, 1]))
        13
        >>> to_magnitude(DigitList(3))
        0
    """
    return fold_digits(sequence.to_list(), sequence.base)


def from_magnitude(
    value: int,
    target_base: int,
    sequence_type: type[DigitList] = DigitList,
) -> DigitList:
    """
    Последовательность цифр величины value в основании target_base.

    Args:
        value: Величина (int произвольной точности)
        target_base: Основание результата
        sequence_type: Класс результата (DigitList или его наследник)

    Returns:
        - пустая последовательность, если value < 0
        - [0], если value == 0
        - цифры value от старшей к младшей

    Examples:
        >>> from_magnitude(13, 2).to_list()
        [1, 1, 0, 1]
        >>> from_magnitude(13, 3).to_list()
        [1, 1, 1]
        >>> from_magnitude(-5, 2).to_list()
        []
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an int, got {type(value).__name__}")
    validate_base(target_base)

    result = sequence_type(target_base)
    if value < 0:
        # Домен только неотрицательных величин
        return result
    if value == 0:
        result._prepend(0)
        return result

    current = value
    while current > 0:
        current, remainder = divmod(current, target_base)
        result._prepend(remainder)
    return result


def change_base(
    sequence: DigitList,
    new_base: int,
    sequence_type: Optional[type[DigitList]] = None,
) -> DigitList:
    """
    Перевод последовательности в другое основание.

    Исходная последовательность не изменяется; результат независим от неё.

    Args:
        sequence: Исходные цифры
        new_base: Целевое основание
        sequence_type: Класс результата (по умолчанию тип sequence)
    """
    magnitude = to_magnitude(sequence)
    logger.debug(
        "change_base: base %d -> %d, %d digits", sequence.base, new_base, len(sequence)
    )
    return from_magnitude(magnitude, new_base, sequence_type or type(sequence))


# =============================================================================
# DECIMAL TEXT
# =============================================================================


def parse_decimal(
    text: Optional[str],
    base: int,
    sequence_type: type[DigitList] = DigitList,
) -> DigitList:
    """
    Разбор неотрицательной десятичной записи в последовательность основания base.

    Args:
        text: Десятичная запись ("13", "0", ...)
        base: Основание результата
        sequence_type: Класс результата

    Returns:
        Последовательность цифр; пустая для None, пустой строки,
        знака или любых не-цифровых символов

    Examples:
        >>> parse_decimal("13", 2).to_list()
        [1, 1, 0, 1]
        >>> parse_decimal("-13", 2).to_list()
        []
    """
    validate_base(base)
    if not isinstance(text, str) or DECIMAL_PATTERN.fullmatch(text) is None:
        logger.debug("parse_decimal: rejected input %r", text)
        return sequence_type(base)
    return from_magnitude(decimal_to_int(text), base, sequence_type)


def render_decimal(sequence: DigitList) -> str:
    """
    Десятичная запись величины последовательности.

    Examples:
        >>> render_decimal(DigitList(2, [1, 1, 0, 1]))
        '13'
    """
    return int_to_decimal(to_magnitude(sequence))
