"""The spinning wheel problem: can a spin land the pointer on sector zero?"""

from __future__ import annotations

from taskbook.tools import InputError, bounded_int, read_option, read_plain_many

_I32 = bounded_int(32)


def can_point_to_zero(n: int, x: int, p: int) -> bool:
    """Tell whether some spin of force 1..p moves the pointer from x to sector 0.

    A spin of force i moves the pointer by i + (i - 1) + ... + 1 sectors;
    forces beyond 2n repeat earlier positions and are not tried.
    """
    bound = min(p, n * 2)
    return any((i * (i + 1) // 2 + x) % n == 0 for i in range(1, bound + 1))


def wheel_task() -> None:
    """Read test cases "n x p" and print Yes or No for each."""
    amount = read_option()
    answers = []
    for _ in range(amount):
        data = read_plain_many(_I32)
        if len(data) < 3:
            raise InputError("Ожидалось три числа: n, x, p")
        n, x, p = data[:3]
        answers.append(can_point_to_zero(n, x, p))
    for answer in answers:
        print("Yes" if answer else "No")