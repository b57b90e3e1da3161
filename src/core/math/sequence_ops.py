"""
Sequence Operations — перестановки цифр на месте

Все операции перезаписывают ЗНАЧЕНИЯ узлов DigitList и никогда не меняют связи:
- swap: обмен значений двух позиций
- sort_ascending / sort_descending: пузырьковая сортировка соседних значений
- shift_left / shift_right: циклический сдвиг значений на одну позицию

Пузырьковая сортировка O(n²) в худшем случае; стабильна, так как меняются
только строго неупорядоченные соседние пары. Проход без обменов завершает сортировку.
"""

from collections.abc import Callable

from src.core.domain.digit_list import NIL, DigitList


# =============================================================================
# SWAP
# =============================================================================


def swap(sequence: DigitList, index1: int, index2: int) -> bool:
    """
    Обмен цифр на позициях index1 и index2.

    Args:
        sequence: Контейнер цифр (изменяется на месте)
        index1: Первая позиция
        index2: Вторая позиция

    Returns:
        False если любой индекс вне [0, size) (без исключения),
        иначе True (index1 == index2 — no-op)
    """
    sequence._check_index_type(index1)
    sequence._check_index_type(index2)
    size = len(sequence)
    if not (0 <= index1 < size and 0 <= index2 < size):
        return False
    if index1 == index2:
        return True

    handle1 = sequence._handle_at(index1)
    handle2 = sequence._handle_at(index2)
    value1 = sequence.value_at(handle1)
    sequence._store(handle1, sequence.value_at(handle2))
    sequence._store(handle2, value1)
    return True


# =============================================================================
# BUBBLE SORT
# =============================================================================


def _bubble_sort(sequence: DigitList, out_of_order: Callable[[int, int], bool]) -> None:
    if len(sequence) < 2:
        return

    # Граница отсортированного хвоста: после каждого прохода сдвигается к head
    boundary = NIL
    swapped = True
    while swapped:
        swapped = False
        current = sequence.head_handle
        while sequence.next_handle(current) != boundary:
            following = sequence.next_handle(current)
            left = sequence.value_at(current)
            right = sequence.value_at(following)
            if out_of_order(left, right):
                sequence._store(current, right)
                sequence._store(following, left)
                swapped = True
            current = following
        boundary = current


def sort_ascending(sequence: DigitList) -> None:
    """Сортировка по возрастанию: d[i] <= d[i+1]."""
    _bubble_sort(sequence, lambda left, right: left > right)


def sort_descending(sequence: DigitList) -> None:
    """Сортировка по убыванию: d[i] >= d[i+1]."""
    _bubble_sort(sequence, lambda left, right: left < right)


# =============================================================================
# CYCLIC SHIFT
# =============================================================================


def shift_left(sequence: DigitList) -> None:
    """
    Циклический сдвиг влево: значение head уходит в tail.

    [1, 2, 3] → [2, 3, 1]; длина < 2 — no-op.
    """
    if len(sequence) < 2:
        return

    current = sequence.head_handle
    first = sequence.value_at(current)
    while sequence.next_handle(current) != NIL:
        following = sequence.next_handle(current)
        sequence._store(current, sequence.value_at(following))
        current = following
    sequence._store(current, first)


def shift_right(sequence: DigitList) -> None:
    """
    Циклический сдвиг вправо: значение tail уходит в head.

    [1, 2, 3] → [3, 1, 2]; длина < 2 — no-op.
    """
    if len(sequence) < 2:
        return

    current = sequence.tail_handle
    last = sequence.value_at(current)
    while sequence.prev_handle(current) != NIL:
        preceding = sequence.prev_handle(current)
        sequence._store(current, sequence.value_at(preceding))
        current = preceding
    sequence._store(current, last)
