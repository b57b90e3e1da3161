"""DigitCursor — двунаправленный курсор DigitList с мутацией во время обхода.

Курсор стоит МЕЖДУ элементами: next() возвращает элемент справа,
previous() — слева. Состояние курсора хранится явно (CursorState):
- IDLE: мутация последнего элемента недопустима
- AFTER_NEXT / AFTER_PREVIOUS: set()/remove() применяются к последнему
  выданному узлу

Переходы:
- next()     → AFTER_NEXT
- previous() → AFTER_PREVIOUS
- remove()   → IDLE
- add()      → IDLE (курсор сдвигается за вставленный узел)
"""

from enum import Enum

from src.core.domain.digit_list import NIL, DigitList
from src.core.domain.errors import IteratorMisuse


class CursorState(str, Enum):
    """Позиционирование курсора относительно последнего выданного узла."""

    IDLE = "IDLE"
    AFTER_NEXT = "AFTER_NEXT"
    AFTER_PREVIOUS = "AFTER_PREVIOUS"


class DigitCursor:
    """Курсор DigitList с поддержкой set/remove/add во время обхода.

    Является итератором Python: `for digit in digits` использует курсор с позиции 0,
    поэтому цифры можно удалять прямо в цикле через cursor.remove().

    Структурное изменение контейнера в обход курсора делает курсор недействительным:
    следующая операция курсора выбросит IteratorMisuse.
    """

    def __init__(self, digits: DigitList, index: int = 0):
        """
        Args:
            digits: обходимый контейнер
            index: позиция курсора в [0, size]
        """
        digits._check_position_index(index)

        self._digits = digits
        self._next = NIL if index == len(digits) else digits._handle_at(index)
        self._next_index = index
        self._last = NIL
        self._state = CursorState.IDLE
        self._expected_mod_count = digits.mod_count

    @property
    def state(self) -> CursorState:
        return self._state

    def _check_for_comodification(self) -> None:
        if self._digits.mod_count != self._expected_mod_count:
            raise IteratorMisuse("Digit list was structurally modified outside of this cursor")

    def _require_positioned(self, operation: str) -> None:
        if self._state == CursorState.IDLE:
            raise IteratorMisuse(f"{operation}() requires a preceding next() or previous()")

    # =========================================================================
    # ОБХОД
    # =========================================================================

    def __iter__(self) -> "DigitCursor":
        return self

    def __next__(self) -> int:
        return self.next()

    def has_next(self) -> bool:
        return self._next_index < len(self._digits)

    def has_previous(self) -> bool:
        return self._next_index > 0

    def next_index(self) -> int:
        return self._next_index

    def previous_index(self) -> int:
        return self._next_index - 1

    def next(self) -> int:
        """Следующая цифра; StopIteration в конце списка."""
        self._check_for_comodification()
        if not self.has_next():
            raise StopIteration

        self._last = self._next
        self._next = self._digits.next_handle(self._next)
        self._next_index += 1
        self._state = CursorState.AFTER_NEXT
        return self._digits.value_at(self._last)

    def previous(self) -> int:
        """Предыдущая цифра; StopIteration в начале списка."""
        self._check_for_comodification()
        if not self.has_previous():
            raise StopIteration

        if self._next == NIL:
            self._next = self._digits.tail_handle
        else:
            self._next = self._digits.prev_handle(self._next)
        self._last = self._next
        self._next_index -= 1
        self._state = CursorState.AFTER_PREVIOUS
        return self._digits.value_at(self._last)

    # =========================================================================
    # МУТАЦИИ
    # =========================================================================

    def set(self, digit: int) -> None:
        """Замена последней выданной цифры."""
        self._check_for_comodification()
        self._require_positioned("set")
        value = self._digits._check_digit(digit)
        self._digits._store(self._last, value)

    def remove(self) -> None:
        """Удаление последнего выданного узла.

        После next() индекс курсора уменьшается на 1; после previous()
        курсор просто переходит на узел за удалённым.
        """
        self._check_for_comodification()
        self._require_positioned("remove")

        last_next = self._digits.next_handle(self._last)
        self._digits._unlink(self._last)

        if self._next == self._last:
            # AFTER_PREVIOUS: курсор стоял перед удалённым узлом
            self._next = last_next
        else:
            self._next_index -= 1

        self._last = NIL
        self._state = CursorState.IDLE
        self._expected_mod_count = self._digits.mod_count

    def add(self, digit: int) -> None:
        """Вставка цифры перед узлом, который вернул бы следующий next().

        Курсор сдвигается за вставленную цифру: previous() вернёт её.
        """
        self._check_for_comodification()
        value = self._digits._check_digit(digit)

        self._digits._link_before(self._next, value)
        self._next_index += 1

        self._last = NIL
        self._state = CursorState.IDLE
        self._expected_mod_count = self._digits.mod_count
