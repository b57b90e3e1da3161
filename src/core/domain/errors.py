"""
Digit List Errors — иерархия исключений контейнера цифр

Четыре независимых вида ошибок; каждый также является ближайшим builtin
(ValueError, IndexError, RuntimeError, TypeError):

- InvalidDigit      — цифра отсутствует (None) или вне диапазона [0, base)
- IndexOutOfRange   — индекс вне допустимых границ операции
- IteratorMisuse    — мутация через курсор без предшествующего next/previous
- TypeMismatch      — аргумент нельзя интерпретировать как цифру или Numeral

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все проверки выполняются ДО изменения связей (нет частичных мутаций)
2. Отрицательный результат вычитания — не ошибка (пустой numeral)
"""


class DigitListError(Exception):
    """Базовое исключение для всех ошибок контейнера цифр."""

    pass


class InvalidDigit(DigitListError, ValueError):
    """Цифра отсутствует или не удовлетворяет 0 <= digit < base."""

    def __init__(self, digit: object, base: int):
        self.digit = digit
        self.base = base
        if digit is None:
            message = "Null digits are not permitted"
        else:
            message = f"Digit {digit} is invalid for base {base}"
        super().__init__(message)


class IndexOutOfRange(DigitListError, IndexError):
    """Структурный индекс вне границ [0, size) или [0, size] для вставки."""

    @classmethod
    def for_index(cls, index: int, size: int) -> "IndexOutOfRange":
        return cls(f"Index: {index}, Size: {size}")


class IteratorMisuse(DigitListError, RuntimeError):
    """Недопустимая мутация через курсор."""

    pass


class TypeMismatch(DigitListError, TypeError):
    """Аргумент гетерогенного типа, не интерпретируемый операцией."""

    pass
