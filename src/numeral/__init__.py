"""Numeral — неотрицательные целые произвольной точности на двусвязном списке цифр.

- Numeral: контейнер цифр с переводом оснований и вычитанием
"""

from .numeral import Numeral

__all__ = [
    "Numeral",
]
