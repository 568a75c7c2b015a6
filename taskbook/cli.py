"""Interactive menu that runs the tasks one after another."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence

from taskbook.avl_tree import generate_tree_demo
from taskbook.information_theory import (
    discrete_random_value_modeling,
    discrete_random_value_modeling_example,
    markov_chain_modeling,
    markov_chain_modeling_example,
)
from taskbook.leetcode import (
    fizz_buzz_task,
    middle_node_task,
    palindrome_task,
    ransom_note_task,
    roman_task,
    steps_task,
    wealth_task,
    weakest_rows_task,
)
from taskbook.number_theory import (
    chained_fractions_task,
    fibonacci_mod_task,
    fibonacci_pisano_task,
    gcd_task,
)
from taskbook.stock_span import stock_span_task
from taskbook.tools import read_option
from taskbook.wheel import wheel_task

_MENU: tuple[tuple[str, Callable[[], object]], ...] = (
    ("Простой алгоритм для задачи о разнице курсов акций", stock_span_task),
    ("Римские числа в арабские", roman_task),
    ("Списки-палиндромы", palindrome_task),
    ("Сборка слов из набора букв", ransom_note_task),
    ("FizzBuzz", fizz_buzz_task),
    ("Середина односвязного списка", middle_node_task),
    ("k слабейших строк матрицы", weakest_rows_task),
    ("Число шагов, чтобы сделать число нулём", steps_task),
    ("Максимальное богатство", wealth_task),
    (
        "Моделирование дискретной случайной величины методом суперпозиции [пример]",
        discrete_random_value_modeling_example,
    ),
    ("Моделирование цепи Маркова [пример]", markov_chain_modeling_example),
    (
        "Моделирование дискретной случайной величины методом суперпозиции",
        discrete_random_value_modeling,
    ),
    ("Моделирование цепи Маркова", markov_chain_modeling),
    ("Вращайте барабан!", wheel_task),
    ("Нахождение НОД (бинарный алгоритм Евклида) [RL]", gcd_task),
    ("Разряды цепной дроби [CF]", chained_fractions_task),
    ("Числа Фибоначчи по модулю [FM]", fibonacci_mod_task),
    (
        "Числа Фибоначчи по модулю с применением периодов Пизано [PP]",
        fibonacci_pisano_task,
    ),
    ("АВЛ-деревья", generate_tree_demo),
)


def print_options() -> None:
    """Print the numbered list of tasks."""
    for number, (title, _) in enumerate(_MENU, start=1):
        print(f"{number}. {title}")


def select(option: int) -> bool:
    """Run the task with the given number; return False for any other number."""
    if 1 <= option <= len(_MENU):
        _MENU[option - 1][1]()
        return True
    return False


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the menu loop until an option outside the menu is chosen."""
    parser = argparse.ArgumentParser(
        prog="taskbook", description="Интерактивный сборник учебных задач."
    )
    parser.parse_args(argv)
    print("Добрый день! Что требуется?")
    try:
        while True:
            print_options()
            if not select(read_option()):
                return 0
            print("\nВыберите задачу или введите 0 для выхода:")
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())