"""Short classic problems: Roman numerals, linked lists, matrices and counting."""

from __future__ import annotations

import sys
from collections import Counter
from typing import Iterable, Optional, Sequence

from taskbook.linked_list import ListNode, is_palindrome, make_single_linked_list
from taskbook.matrix import read_matrix
from taskbook.tools import InputError, bounded_int, read, read_many, say

_I32 = bounded_int(32)

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_SUBTRACTIVE = {"I": "VX", "X": "LC", "C": "DM"}
_UNKNOWN_SYMBOL = (
    "Не удалось сконвертировать число, т.к. оно содержит неизвестные символы."
)


def roman_to_int(s: str) -> int:
    """Convert a number in Roman notation to an integer."""
    if not s:
        raise ValueError("Пустая строка не является римским числом.")
    total = 0
    for current, following in zip(s, s[1:]):
        if current not in _ROMAN_VALUES:
            raise ValueError(_UNKNOWN_SYMBOL)
        value = _ROMAN_VALUES[current]
        if following in _SUBTRACTIVE.get(current, ""):
            total -= value
        else:
            total += value
    last = s[-1]
    if last not in _ROMAN_VALUES:
        raise ValueError(_UNKNOWN_SYMBOL)
    return total + _ROMAN_VALUES[last]


def _check_byte_char(char: str) -> None:
    if ord(char) > 0xFF:
        raise ValueError(f"Символ {char!r} вне диапазона 0..255")


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Tell whether the note can be assembled from the letters of the magazine."""
    for char in magazine:
        _check_byte_char(char)
    available = Counter(magazine)
    for char in ransom_note:
        _check_byte_char(char)
        if available[char] == 0:
            return False
        available[char] -= 1
    return True


def fizz_buzz(n: int) -> list[str]:
    """Numbers 1..n as strings, with multiples of 3 and 5 replaced by Fizz, Buzz, FizzBuzz."""
    answer = []
    for i in range(1, n + 1):
        if i % 15 == 0:
            answer.append("FizzBuzz")
        elif i % 3 == 0:
            answer.append("Fizz")
        elif i % 5 == 0:
            answer.append("Buzz")
        else:
            answer.append(str(i))
    return answer


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; for an even length, the second of the two middles."""
    if head is None:
        return None
    slow = fast = head
    while fast.next is not None:
        if fast.next.next is not None:
            fast = fast.next.next
            slow = slow.next
        else:
            return slow.next
    return slow


def k_weakest_rows(matrix: Sequence[Sequence[int]], k: int) -> list[int]:
    """Indices of the k weakest rows: fewest ones first, ties by lower index."""
    if k < 0:
        raise ValueError("Число слабейших строк не может быть отрицательным")

    def strength(index: int) -> tuple[int, int]:
        return sum(1 for cell in matrix[index] if cell == 1), index

    ranked = [0]
    for i in range(1, len(matrix)):
        key = strength(i)
        position = next(
            (n for n, j in enumerate(ranked) if key < strength(j)), None
        )
        if position is not None:
            if len(ranked) == k:
                ranked.pop()
            ranked.insert(position, i)
        elif len(ranked) < k:
            ranked.append(i)
    return ranked


def number_of_steps(num: int) -> int:
    """Steps to reach zero, halving even numbers and decrementing odd ones."""
    steps = 0
    while num > 0:
        steps += 1
        if num % 2 == 0:
            num //= 2
        else:
            num -= 1
    return steps


def maximum_wealth(accounts: Iterable[Iterable[int]]) -> int:
    """The largest row sum."""
    return max(sum(row) for row in accounts)


def _debug_strings(values: Iterable[str]) -> str:
    return "[" + ", ".join(f'"{value}"' for value in values) + "]"


def roman_task() -> None:
    """Read a Roman numeral and print its value."""
    roman_num = read(str, "Введите число в римской нотации:")
    try:
        say(f"Результат: {roman_to_int(roman_num)}")
    except ValueError as exc:
        print(exc, file=sys.stderr)


def palindrome_task() -> None:
    """Read numbers and tell whether their list is a palindrome."""
    numbers = read_many(_I32, "Введите числа через пробел: ")
    if is_palindrome(make_single_linked_list(numbers)):
        say("Данный список является палиндромом.")
    else:
        say("Данный список - не палиндром.")


def ransom_note_task() -> None:
    """Read a note and a magazine and tell whether the note can be assembled."""
    ransom_note = read(str, "Введите заметку, которую вы хотели бы составить:")
    magazine = read(str, "Введите магазин доступных букв:")
    if can_construct(ransom_note, magazine):
        say("Да, можно составить заметку!")
    else:
        say("Нет, заметку составить нельзя.")


def fizz_buzz_task() -> None:
    """Read a positive number and print its FizzBuzz sequence."""
    n = read(_I32, "Введите любое число, большее нуля:")
    if n <= 0:
        raise InputError("Число не больше нуля.")
    say(f"Результат: {_debug_strings(fizz_buzz(n))}")


def middle_node_task() -> None:
    """Read numbers and print the middle of their linked list."""
    numbers = read_many(_I32, "Введите числа через пробел: ")
    node = middle_node(make_single_linked_list(numbers))
    if node is None:
        raise InputError("Не удалось найти середину списка")
    say(f"Середина списка: {node.val}, полный вывод: {node!r}")


def weakest_rows_task() -> None:
    """Read a 0/1 matrix and k, and print the k weakest rows."""
    say("Введите целочисленную матрицу, после ввода пропустите одну строку:")
    matrix = read_matrix(_I32)
    k = read(_I32, "Введите число слабейших строк, которые нужно вывести:")
    if k < 0 or k > len(matrix):
        raise InputError("Число слабейших строк больше числа строк в введённой матрице")
    say(f"Ответ: {k_weakest_rows(matrix, k)}")


def steps_task() -> None:
    """Read a number and print how many steps reduce it to zero."""
    say("На каждом шаге чётное число уменьшается вдвое, из нечётного - вычитается единица.")
    num = read(_I32, "Введите число:")
    say(f"Результат: {number_of_steps(num)}")


def wealth_task() -> None:
    """Read a matrix of accounts and print the largest wealth."""
    say("Введите целочисленную матрицу, после ввода пропустите одну строку:")
    matrix = read_matrix(_I32)
    say(f"Результат: {maximum_wealth(matrix)}")