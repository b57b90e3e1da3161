"""
DigitList — двусвязный контейнер цифр с фиксированным основанием

Упорядоченная последовательность цифр от старшей (head) к младшей (tail).
Узлы хранятся в арене и адресуются стабильными целочисленными handle:
- _values[h]: цифра узла (None для освобождённого слота)
- _next[h]:   handle следующего узла (NIL у tail)
- _prev[h]:   handle предыдущего узла (NIL у head)

Контейнер единолично владеет всеми узлами и является единственным местом,
где выполняется связывание/развязывание. Освобождённые слоты переиспользуются
через free-list.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0 <= digit < base для каждого узла
2. size == 0 ⇔ head == tail == NIL; size == 1 ⇔ head == tail
3. prev(head) == NIL, next(tail) == NIL; прямой и обратный обход
   посещают одни и те же узлы в обратном порядке
4. Валидация выполняется до любой мутации связей
5. mod_count увеличивается при каждом структурном изменении
"""

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Final, Optional

from src.core.domain.errors import IndexOutOfRange, InvalidDigit, TypeMismatch
from src.core.domain.settings import DEFAULT_SETTINGS, DIGIT_ALPHABET, validate_base

if TYPE_CHECKING:
    from src.core.domain.cursor import DigitCursor

# Отсутствующая связь (аналог null-ссылки)
NIL: Final[int] = -1


class DigitList:
    """
    Индексируемый изменяемый контейнер цифр в основании base.

    Основание фиксируется при создании и больше не меняется.
    Позиционный доступ O(n), но обход начинается с ближайшего конца списка.
    """

    def __init__(self, base: int = DEFAULT_SETTINGS.default_base, digits: Iterable[int] = ()):
        """
        Args:
            base: Основание системы счисления
            digits: Начальные цифры от старшей к младшей
        """
        self._base = validate_base(base)

        # Арена узлов
        self._values: list[Optional[int]] = []
        self._next: list[int] = []
        self._prev: list[int] = []
        self._free: list[int] = []

        self._head = NIL
        self._tail = NIL
        self._size = 0
        self._mod_count = 0

        self.add_all(digits)

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def base(self) -> int:
        return self._base

    @property
    def mod_count(self) -> int:
        """Счётчик структурных изменений (для детекции мутаций за курсором)."""
        return self._mod_count

    @property
    def head_handle(self) -> int:
        return self._head

    @property
    def tail_handle(self) -> int:
        return self._tail

    def _check_handle(self, handle: int) -> int:
        """Handle живого узла; NIL и освобождённые слоты отклоняются"""
        if (
            self._is_int(handle)
            and 0 <= handle < len(self._values)
            and self._values[handle] is not None
        ):
            return handle
        raise IndexOutOfRange(f"Invalid handle: {handle}")

    def next_handle(self, handle: int) -> int:
        return self._next[self._check_handle(handle)]

    def prev_handle(self, handle: int) -> int:
        return self._prev[self._check_handle(handle)]

    def value_at(self, handle: int) -> int:
        return self._values[self._check_handle(handle)]

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    # =========================================================================
    # ВАЛИДАЦИЯ
    # =========================================================================

    def _check_digit(self, digit: object) -> int:
        """
        Проверка цифры для текущего основания.

        Raises:
            InvalidDigit: digit is None или вне [0, base)
            TypeMismatch: digit не int (bool тоже отвергается)
        """
        if digit is None:
            raise InvalidDigit(None, self._base)
        if isinstance(digit, bool) or not isinstance(digit, int):
            raise TypeMismatch(f"Expected an int digit, got {type(digit).__name__}")
        if digit < 0 or digit >= self._base:
            raise InvalidDigit(digit, self._base)
        return digit

    def _check_digits(self, digits: Iterable[int]) -> list[int]:
        """Проверка всей коллекции цифр до начала мутации."""
        if digits is None or isinstance(digits, (str, bytes, bytearray)):
            raise TypeMismatch(f"Expected a sequence of digits, got {type(digits).__name__}")
        try:
            items = list(digits)
        except TypeError:
            raise TypeMismatch(
                f"Expected a sequence of digits, got {type(digits).__name__}"
            ) from None
        return [self._check_digit(digit) for digit in items]

    @staticmethod
    def _check_index_type(index: object) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeMismatch(f"Index must be an int, got {type(index).__name__}")
        return index

    def _check_element_index(self, index: int) -> int:
        """Индекс существующего элемента: [0, size)."""
        self._check_index_type(index)
        if index < 0 or index >= self._size:
            raise IndexOutOfRange.for_index(index, self._size)
        return index

    def _check_position_index(self, index: int) -> int:
        """Позиция вставки или курсора: [0, size]."""
        self._check_index_type(index)
        if index < 0 or index > self._size:
            raise IndexOutOfRange.for_index(index, self._size)
        return index

    # =========================================================================
    # АРЕНА И СВЯЗИ
    # =========================================================================

    def _allocate(self, digit: int, prev: int, nxt: int) -> int:
        if self._free:
            handle = self._free.pop()
            self._values[handle] = digit
            self._prev[handle] = prev
            self._next[handle] = nxt
        else:
            handle = len(self._values)
            self._values.append(digit)
            self._prev.append(prev)
            self._next.append(nxt)
        return handle

    def _link_before(self, successor: int, digit: int) -> int:
        """
        Вставка нового узла перед successor (NIL → в конец).

        Цифра должна быть уже проверена.

        Returns:
            handle нового узла
        """
        predecessor = self._tail if successor == NIL else self._prev[successor]
        handle = self._allocate(digit, predecessor, successor)

        if predecessor == NIL:
            self._head = handle
        else:
            self._next[predecessor] = handle

        if successor == NIL:
            self._tail = handle
        else:
            self._prev[successor] = handle

        self._size += 1
        self._mod_count += 1
        return handle

    def _unlink(self, handle: int) -> int:
        """
        Развязывание узла с обоими соседями и возврат слота в free-list.

        Returns:
            Цифра удалённого узла
        """
        value = self._values[handle]
        prev = self._prev[handle]
        nxt = self._next[handle]

        if prev == NIL:
            self._head = nxt
        else:
            self._next[prev] = nxt

        if nxt == NIL:
            self._tail = prev
        else:
            self._prev[nxt] = prev

        # Слот полностью отсоединён до переиспользования
        self._values[handle] = None
        self._prev[handle] = NIL
        self._next[handle] = NIL
        self._free.append(handle)

        self._size -= 1
        self._mod_count += 1
        return value

    def _store(self, handle: int, digit: int) -> None:
        """Перезапись значения узла без изменения связей."""
        self._values[handle] = digit

    def _prepend(self, digit: int) -> None:
        self._link_before(self._head, digit)

    def _append_unchecked(self, digit: int) -> None:
        self._link_before(NIL, digit)

    def _handle_at(self, index: int) -> int:
        """
        Поиск узла по индексу с ближайшего конца списка.

        Индекс должен быть уже проверен: [0, size).
        """
        if index < (self._size >> 1):
            handle = self._head
            for _ in range(index):
                handle = self._next[handle]
        else:
            handle = self._tail
            for _ in range(self._size - 1 - index):
                handle = self._prev[handle]
        return handle

    def _iter_handles(self) -> Iterator[int]:
        handle = self._head
        while handle != NIL:
            # next читается до yield: вызывающий код может развязать handle
            nxt = self._next[handle]
            yield handle
            handle = nxt

    def _spawn(self) -> "DigitList":
        """Новый пустой контейнер того же типа и основания."""
        return type(self)(self._base)

    # =========================================================================
    # ПОЗИЦИОННЫЙ ДОСТУП
    # =========================================================================

    def get(self, index: int) -> int:
        """
        Цифра по индексу.

        Raises:
            IndexOutOfRange: index вне [0, size)
        """
        self._check_element_index(index)
        return self._values[self._handle_at(index)]

    def set(self, index: int, digit: int) -> int:
        """
        Замена цифры по индексу.

        Args:
            index: Индекс в [0, size)
            digit: Новая цифра в [0, base)

        Returns:
            Предыдущая цифра

        Raises:
            IndexOutOfRange: index вне [0, size)
            InvalidDigit: digit отсутствует или вне основания
            TypeMismatch: digit не int
        """
        self._check_element_index(index)
        value = self._check_digit(digit)
        handle = self._handle_at(index)
        old = self._values[handle]
        self._values[handle] = value
        return old

    def append(self, digit: int) -> bool:
        """Добавление цифры в конец (младший разряд)."""
        value = self._check_digit(digit)
        self._append_unchecked(value)
        return True

    def insert(self, index: int, digit: int) -> None:
        """
        Вставка цифры перед позицией index.

        index == size эквивалентен append.

        Raises:
            IndexOutOfRange: index вне [0, size]
            InvalidDigit: digit отсутствует или вне основания
            TypeMismatch: digit не int
        """
        self._check_position_index(index)
        value = self._check_digit(digit)
        successor = NIL if index == self._size else self._handle_at(index)
        self._link_before(successor, value)

    def remove_at(self, index: int) -> int:
        """
        Удаление цифры по индексу.

        Returns:
            Удалённая цифра

        Raises:
            IndexOutOfRange: index вне [0, size)
        """
        self._check_element_index(index)
        return self._unlink(self._handle_at(index))

    def remove(self, digit: int) -> bool:
        """
        Удаление первого вхождения цифры.

        Returns:
            True если цифра найдена и удалена
        """
        value = self._check_digit(digit)
        for handle in self._iter_handles():
            if self._values[handle] == value:
                self._unlink(handle)
                return True
        return False

    def __getitem__(self, index: int) -> int:
        return self.get(index)

    def __setitem__(self, index: int, digit: int) -> None:
        self.set(index, digit)

    def __delitem__(self, index: int) -> None:
        self.remove_at(index)

    # =========================================================================
    # ПОИСК
    # =========================================================================

    @staticmethod
    def _is_int(value: object) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)

    def index_of(self, value: object) -> int:
        """Индекс первого вхождения или -1 (в т.ч. для не-цифр)."""
        if not self._is_int(value):
            return -1
        for index, handle in enumerate(self._iter_handles()):
            if self._values[handle] == value:
                return index
        return -1

    def last_index_of(self, value: object) -> int:
        """Индекс последнего вхождения или -1; обход от tail."""
        if not self._is_int(value):
            return -1
        index = self._size - 1
        handle = self._tail
        while handle != NIL:
            if self._values[handle] == value:
                return index
            index -= 1
            handle = self._prev[handle]
        return -1

    def contains(self, value: object) -> bool:
        return self.index_of(value) != -1

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    # =========================================================================
    # ОПЕРАЦИИ С КОЛЛЕКЦИЯМИ
    # =========================================================================

    def contains_all(self, digits: Iterable[int]) -> bool:
        """
        Проверка, что все цифры коллекции присутствуют в контейнере.

        Raises:
            InvalidDigit, TypeMismatch: элемент коллекции не цифра основания
        """
        present = set(self._iter_values())
        return all(digit in present for digit in self._check_digits(digits))

    def add_all(self, digits: Iterable[int], index: Optional[int] = None) -> bool:
        """
        Вставка всех цифр коллекции начиная с позиции index (по умолчанию в конец).

        Вся коллекция проверяется до первой вставки.

        Args:
            digits: Цифры в порядке от старшей к младшей
            index: Позиция вставки в [0, size] (None → size)

        Returns:
            False если коллекция пуста, иначе True

        Raises:
            IndexOutOfRange: index вне [0, size]
            InvalidDigit, TypeMismatch: элемент коллекции не цифра основания
        """
        if index is None:
            index = self._size
        self._check_position_index(index)
        values = self._check_digits(digits)
        if not values:
            return False

        successor = NIL if index == self._size else self._handle_at(index)
        for value in values:
            self._link_before(successor, value)
        return True

    def remove_all(self, digits: Iterable[int]) -> bool:
        """
        Удаление всех вхождений цифр коллекции.

        Returns:
            True если контейнер изменился
        """
        targets = set(self._check_digits(digits))
        modified = False
        for handle in self._iter_handles():
            if self._values[handle] in targets:
                self._unlink(handle)
                modified = True
        return modified

    def retain_all(self, digits: Iterable[int]) -> bool:
        """
        Удаление всех цифр, отсутствующих в коллекции.

        Returns:
            True если контейнер изменился
        """
        keep = set(self._check_digits(digits))
        modified = False
        for handle in self._iter_handles():
            if self._values[handle] not in keep:
                self._unlink(handle)
                modified = True
        return modified

    def clear(self) -> None:
        """Удаление всех узлов; арена освобождается целиком."""
        self._values.clear()
        self._next.clear()
        self._prev.clear()
        self._free.clear()
        self._head = NIL
        self._tail = NIL
        self._size = 0
        self._mod_count += 1

    def sublist(self, from_index: int, to_index: int) -> "DigitList":
        """
        Независимая копия цифр в диапазоне [from_index, to_index).

        Raises:
            IndexOutOfRange: если не 0 <= from_index <= to_index <= size
        """
        self._check_index_type(from_index)
        self._check_index_type(to_index)
        if from_index < 0 or to_index > self._size or from_index > to_index:
            raise IndexOutOfRange(
                f"fromIndex: {from_index}, toIndex: {to_index}, size: {self._size}"
            )

        result = self._spawn()
        if from_index == to_index:
            return result

        handle = self._handle_at(from_index)
        for _ in range(to_index - from_index):
            result._append_unchecked(self._values[handle])
            handle = self._next[handle]
        return result

    # =========================================================================
    # ИТЕРАЦИЯ И ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def cursor(self, index: int = 0) -> "DigitCursor":
        """
        Двунаправленный курсор, стоящий перед элементом index.

        Raises:
            IndexOutOfRange: index вне [0, size]
        """
        from src.core.domain.cursor import DigitCursor

        return DigitCursor(self, index)

    def __iter__(self) -> "DigitCursor":
        return self.cursor(0)

    def __reversed__(self) -> Iterator[int]:
        handle = self._tail
        while handle != NIL:
            yield self._values[handle]
            handle = self._prev[handle]

    def _iter_values(self) -> Iterator[int]:
        for handle in self._iter_handles():
            yield self._values[handle]

    def to_list(self) -> list[int]:
        return list(self._iter_values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitList):
            return NotImplemented
        if type(self) is not type(other):
            return False
        if self._base != other._base or self._size != other._size:
            return False
        return self.to_list() == other.to_list()

    __hash__ = None  # Mutable

    def __str__(self) -> str:
        return "".join(DIGIT_ALPHABET[digit] for digit in self._iter_values())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base={self._base}, digits={self.to_list()})"
