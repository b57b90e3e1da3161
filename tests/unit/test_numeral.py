"""Тесты для Numeral — величины на двусвязном списке цифр.

Coverage:
- Десятичный ввод/вывод, каноничный ноль
- change_base / change_scale
- subtract: max(0, a - b) семантика, пустой numeral для отрицательной разности
- Делегирование swap/sort/shift
- Снимки NumeralSnapshot
"""

import pytest

from src.core.domain import DigitList, NumeralSettings, NumeralSnapshot, TypeMismatch
from src.numeral import Numeral


class TestNumeralConstruction:
    """Создание numeral."""

    def test_default_base_binary(self):
        assert Numeral().base == 2
        assert Numeral.from_decimal("13").base == 2

    def test_from_decimal_thirteen(self):
        numeral = Numeral.from_decimal("13")
        assert numeral.to_list() == [1, 1, 0, 1]
        assert str(numeral) == "1101"
        assert isinstance(numeral, Numeral)

    def test_from_decimal_other_base(self):
        assert Numeral.from_decimal("255", 16).to_list() == [15, 15]

    def test_from_decimal_zero_is_canonical_zero(self):
        assert Numeral.from_decimal("0").to_list() == [0]

    @pytest.mark.parametrize("text", [None, "", "-5", "12a"])
    def test_from_decimal_malformed_is_empty(self, text):
        numeral = Numeral.from_decimal(text)
        assert numeral.is_empty()
        assert str(numeral) == ""

    def test_from_magnitude_negative_is_empty(self):
        assert Numeral.from_magnitude(-1, 10).is_empty()

    def test_empty_not_equal_to_zero(self):
        """Пустой numeral и каноничный ноль — разные представления."""
        assert Numeral(2) != Numeral.from_magnitude(0, 2)
        assert Numeral(2).magnitude() == Numeral.from_magnitude(0, 2).magnitude()

    def test_numeral_not_equal_to_plain_digit_list(self):
        assert Numeral(2, [1]) != DigitList(2, [1])

    def test_sublist_is_numeral(self):
        part = Numeral.from_decimal("13").sublist(1, 3)
        assert isinstance(part, Numeral)
        assert part.to_list() == [1, 0]


class TestNumeralRendering:
    """Десятичное и позиционное представление."""

    def test_to_decimal_string(self):
        assert Numeral(2, [1, 1, 0, 1]).to_decimal_string() == "13"

    def test_empty_renders_zero_decimal(self):
        assert Numeral(2).to_decimal_string() == "0"

    def test_decimal_round_trip(self):
        text = "340282366920938463463374607431768211457"
        assert Numeral.from_decimal(text).to_decimal_string() == text


class TestChangeBase:
    """Перевод numeral в другое основание."""

    def test_thirteen_to_ternary(self):
        result = Numeral.from_decimal("13").change_base(3)
        assert result.to_list() == [1, 1, 1]
        assert result.base == 3
        assert isinstance(result, Numeral)

    def test_back_to_decimal(self):
        binary = Numeral.from_decimal("13")
        assert binary.change_base(10).to_list() == [1, 3]
        assert binary.to_decimal_string() == "13"

    def test_source_unchanged(self):
        binary = Numeral.from_decimal("13")
        binary.change_base(3)
        assert binary.to_list() == [1, 1, 0, 1]

    def test_round_trip_idempotence(self):
        binary = Numeral.from_decimal("1000000007")
        assert binary.change_base(7).change_base(2) == binary

    def test_change_scale_default_ternary(self):
        assert Numeral.from_decimal("13").change_scale().to_list() == [1, 1, 1]

    def test_change_scale_custom_settings(self):
        settings = NumeralSettings(default_base=2, change_scale_base=16)
        assert Numeral.from_decimal("255").change_scale(settings).to_list() == [15, 15]

    def test_result_is_independent(self):
        binary = Numeral.from_decimal("13")
        ternary = binary.change_base(3)
        ternary.set(0, 2)
        assert binary.to_decimal_string() == "13"


class TestSubtract:
    """Вычитание через magnitude."""

    def test_thirteen_minus_five(self):
        """1101 - 101 = 1000."""
        result = Numeral.from_decimal("13").subtract(Numeral.from_decimal("5"))
        assert str(result) == "1000"
        assert result.to_decimal_string() == "8"

    def test_negative_result_is_empty(self):
        """5 - 13 < 0 → пустой numeral в основании уменьшаемого."""
        result = Numeral.from_decimal("5").subtract(Numeral.from_decimal("13"))
        assert result.is_empty()
        assert result.base == 2

    def test_self_subtraction_is_canonical_zero(self):
        numeral = Numeral.from_decimal("13")
        assert numeral.subtract(numeral).to_list() == [0]

    def test_subtract_zero_is_identity(self):
        numeral = Numeral.from_decimal("13")
        assert numeral.subtract(Numeral.from_decimal("0")) == numeral

    def test_subtract_empty_is_identity(self):
        numeral = Numeral.from_decimal("13")
        assert numeral.subtract(Numeral(2)) == numeral

    def test_empty_minus_zero_is_canonical_zero(self):
        """Пустой numeral имеет magnitude 0, результат не пустой."""
        result = Numeral(2).subtract(Numeral.from_decimal("0"))
        assert result.to_list() == [0]
        assert (Numeral(2) - Numeral(2)).to_list() == [0]

    def test_operands_in_different_bases(self):
        """Основания операндов независимы; результат в основании уменьшаемого."""
        minuend = Numeral.from_decimal("100", 10)
        subtrahend = Numeral.from_decimal("13", 3)
        result = minuend.subtract(subtrahend)
        assert result.base == 10
        assert result.to_list() == [8, 7]

    @pytest.mark.parametrize("a, b", [(0, 0), (1, 0), (0, 1), (255, 254), (10**30, 10**29), (7, 7**3)])
    def test_max_zero_semantics(self, a, b):
        minuend = Numeral.from_magnitude(a, 2)
        subtrahend = Numeral.from_magnitude(b, 5)
        result = minuend.subtract(subtrahend)
        if a >= b:
            assert result.magnitude() == a - b
        else:
            assert result.is_empty()
            assert result.magnitude() == 0

    def test_operands_not_mutated(self):
        a = Numeral.from_decimal("13")
        b = Numeral.from_decimal("5")
        a.subtract(b)
        assert a.to_list() == [1, 1, 0, 1]
        assert b.to_list() == [1, 0, 1]

    def test_minus_operator(self):
        assert (Numeral.from_decimal("13") - Numeral.from_decimal("5")).to_decimal_string() == "8"

    def test_non_numeral_argument(self):
        """Аргумент не Numeral → TypeMismatch."""
        numeral = Numeral.from_decimal("13")
        with pytest.raises(TypeMismatch):
            numeral.subtract(5)
        with pytest.raises(TypeMismatch):
            numeral.subtract(DigitList(2, [1]))

    def test_minus_operator_non_numeral(self):
        with pytest.raises(TypeError):
            Numeral.from_decimal("13") - 5


class TestNumeralSequenceOperations:
    """Делегирование перестановок в sequence_ops."""

    def test_sort_and_shift(self):
        numeral = Numeral.from_decimal("13")
        numeral.sort_ascending()
        assert str(numeral) == "0111"
        numeral.sort_descending()
        assert str(numeral) == "1110"
        numeral.shift_right()
        assert str(numeral) == "0111"
        numeral.shift_left()
        assert str(numeral) == "1110"

    def test_swap(self):
        numeral = Numeral.from_decimal("13")
        assert numeral.swap(1, 2) is True
        assert str(numeral) == "1011"
        assert numeral.swap(0, 4) is False


class TestSnapshot:
    """Снимки numeral."""

    def test_to_snapshot(self):
        snapshot = Numeral.from_decimal("13").to_snapshot()
        assert snapshot == NumeralSnapshot(base=2, digits=[1, 1, 0, 1], decimal="13")

    def test_empty_snapshot(self):
        snapshot = Numeral(3).to_snapshot()
        assert snapshot.is_empty()
        assert snapshot.decimal == ""

    def test_from_snapshot(self):
        original = Numeral.from_decimal("42", 3)
        assert Numeral.from_snapshot(original.to_snapshot()) == original
