"""Number theory problems: binary GCD, continued fractions, Fibonacci modulo m."""

from __future__ import annotations

from taskbook.tools import InputError, bounded_int, read_many, say

_I32 = bounded_int(32)
_U128 = bounded_int(128, signed=False)


def _trailing_zeros(value: int) -> int:
    return (value & -value).bit_length() - 1


def _as_i32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def gcd(u: int, v: int) -> int:
    """Greatest common divisor of two 32-bit integers by the binary Euclidean algorithm."""
    v = abs(v)
    if u == 0:
        return _as_i32(v)
    u = abs(u)
    if v == 0:
        return _as_i32(u)
    shift = _trailing_zeros(u | v)
    u >>= _trailing_zeros(u)
    v >>= _trailing_zeros(v)
    while u != v:
        if u < v:
            u, v = v, u
        u -= v
        u >>= _trailing_zeros(u)
    return _as_i32(u << shift)


def find_chained_fraction_numbers(a: int, b: int) -> list[int]:
    """Partial quotients of the continued fraction of max(a, b) / min(a, b)."""
    if a < 0 or b < 0:
        raise ValueError("Не удалось разделить два числа")
    numbers = []
    while True:
        if a < b:
            a, b = b, a
        if b == 0:
            break
        numbers.append(a // b)
        a %= b
    return numbers


def fib_mod(n: int, m: int) -> int:
    """The n-th Fibonacci number modulo m, computed step by step."""
    if n == 0:
        return 0
    if n <= 2:
        return 1
    previous, current = 1, 1
    for _ in range(3, n + 1):
        previous, current = current, (previous + current) % m
    return current


def get_pisano_period(m: int) -> int:
    """Length of the period of Fibonacci numbers modulo m."""
    n = 2
    previous, current = 1, 1
    while True:
        previous, current = current, (previous + current) % m
        n += 1
        if previous == 1 and current == 0:
            return n


def fib_mod_pisano(n: int, m: int) -> int:
    """The n-th Fibonacci number modulo m, reducing n by the Pisano period first."""
    if n == 0:
        return 0
    if n <= 2:
        return 1
    n %= get_pisano_period(m)
    previous, current = 1, 1
    for _ in range(3, n + 1):
        previous, current = current, (previous + current) % m
    return current


def _read_pair(kind, prompt: str) -> tuple[int, int]:
    numbers = read_many(kind, prompt)
    if len(numbers) != 2:
        raise InputError("Вы ввели не два числа")
    return numbers[0], numbers[1]


def gcd_task() -> None:
    """Read two numbers and print their greatest common divisor."""
    a, b = _read_pair(_I32, "Введите два числа:")
    say(f"Наибольший общий делитель - {gcd(a, b)}")


def chained_fractions_task() -> None:
    """Read two numbers and print the partial quotients of their continued fraction."""
    a, b = _read_pair(_I32, "Введите два числа:")
    say(f"Результат: {find_chained_fraction_numbers(a, b)}")


_FIB_PROMPT = "Введите номер числа Фибоначчи и модуль, по которому хотите его получить:"


def fibonacci_mod_task() -> None:
    """Read n and m and print the n-th Fibonacci number modulo m."""
    n, m = _read_pair(_U128, _FIB_PROMPT)
    say(f"{n}-е число Фибоначчи по модулю {m} = {fib_mod(n, m)}.")


def fibonacci_pisano_task() -> None:
    """Read n and m and print the n-th Fibonacci number modulo m using the Pisano period."""
    n, m = _read_pair(_U128, _FIB_PROMPT)
    say(f"{n}-е число Фибоначчи по модулю {m} = {fib_mod_pisano(n, m)}.")