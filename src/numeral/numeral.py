"""Numeral — неотрицательное целое произвольной точности на DigitList.

Numeral является контейнером цифр (DigitList) с операциями:
- from_decimal / to_decimal_string: десятичный текст ↔ numeral
- change_base / change_scale: перевод в другое основание (новый numeral)
- subtract: разность величин, нормализованная через magnitude
- swap / sort / shift: перестановки цифр на месте

Каноничный ноль — одна цифра 0. Пустой numeral означает отсутствие значения
(некорректный ввод или отрицательный результат вычитания).
"""

import logging
from collections.abc import Iterable
from typing import Optional

from src.core.domain.digit_list import DigitList
from src.core.domain.errors import TypeMismatch
from src.core.domain.settings import DEFAULT_SETTINGS, NumeralSettings
from src.core.domain.snapshot import NumeralSnapshot
from src.core.math import base_conversion, sequence_ops

logger = logging.getLogger(__name__)


class Numeral(DigitList):
    """Неотрицательное целое как последовательность цифр от старшей к младшей.

    Все операции, возвращающие Numeral, создают новый независимый экземпляр;
    операнды никогда не изменяются и не разделяют узлы с результатом.
    """

    def __init__(self, base: int = DEFAULT_SETTINGS.default_base, digits: Iterable[int] = ()):
        super().__init__(base, digits)

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_decimal(cls, text: Optional[str], base: Optional[int] = None) -> "Numeral":
        """Numeral из десятичной записи; пустой для некорректного ввода.

        Args:
            text: неотрицательная десятичная запись без пробелов
            base: основание результата (default: DEFAULT_SETTINGS.default_base)
        """
        if base is None:
            base = DEFAULT_SETTINGS.default_base
        return base_conversion.parse_decimal(text, base, cls)

    @classmethod
    def from_magnitude(cls, value: int, base: Optional[int] = None) -> "Numeral":
        """Numeral величины value; пустой для value < 0."""
        if base is None:
            base = DEFAULT_SETTINGS.default_base
        return base_conversion.from_magnitude(value, base, cls)

    @classmethod
    def from_snapshot(cls, snapshot: NumeralSnapshot) -> "Numeral":
        return cls(snapshot.base, snapshot.digits)

    # =========================================================================
    # ЗНАЧЕНИЕ И ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def magnitude(self) -> int:
        return base_conversion.to_magnitude(self)

    def to_decimal_string(self) -> str:
        """Десятичная запись величины ("0" для пустого numeral)."""
        return base_conversion.render_decimal(self)

    def to_snapshot(self) -> NumeralSnapshot:
        digits = self.to_list()
        return NumeralSnapshot(
            base=self.base,
            digits=digits,
            decimal=self.to_decimal_string() if digits else "",
        )

    # =========================================================================
    # ОПЕРАЦИИ
    # =========================================================================

    def change_base(self, new_base: int) -> "Numeral":
        """Независимый numeral той же величины в основании new_base."""
        return base_conversion.change_base(self, new_base, type(self))

    def change_scale(self, settings: NumeralSettings = DEFAULT_SETTINGS) -> "Numeral":
        """Перевод в дополнительное основание settings.change_scale_base."""
        return self.change_base(settings.change_scale_base)

    def subtract(self, other: "Numeral") -> "Numeral":
        """Разность self - other в основании self.

        Основания операндов независимы: обе величины сначала переводятся
        в magnitude. Пустой операнд сворачивается в 0, поэтому empty - zero и
        empty - empty дают каноничный ноль [0].

        Returns:
            Новый numeral; пустой, если разность отрицательна

        Raises:
            TypeMismatch: other не Numeral
        """
        if not isinstance(other, Numeral):
            raise TypeMismatch(
                f"Argument must be of type Numeral, got {type(other).__name__}"
            )

        difference = self.magnitude() - other.magnitude()
        if difference < 0:
            logger.debug(
                "subtract: negative difference in base %d, returning empty numeral", self.base
            )
            return type(self)(self.base)
        return base_conversion.from_magnitude(difference, self.base, type(self))

    def __sub__(self, other: object) -> "Numeral":
        if not isinstance(other, Numeral):
            return NotImplemented
        return self.subtract(other)

    def swap(self, index1: int, index2: int) -> bool:
        return sequence_ops.swap(self, index1, index2)

    def sort_ascending(self) -> None:
        sequence_ops.sort_ascending(self)

    def sort_descending(self) -> None:
        sequence_ops.sort_descending(self)

    def shift_left(self) -> None:
        sequence_ops.shift_left(self)

    def shift_right(self) -> None:
        sequence_ops.shift_right(self)
