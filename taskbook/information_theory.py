"""Modelling a discrete random value by superposition and a Markov chain."""

from __future__ import annotations

from typing import Any, Protocol

from taskbook.markov_chain import MarkovChain
from taskbook.matrix import Matrix, read_matrix
from taskbook.random_ensemble import RandomEnsemble
from taskbook.tools import bounded_int, read, say, write

_U32 = bounded_int(32, signed=False)
_USIZE = bounded_int(64, signed=False)

_AMOUNT_PROMPT = "Введите число генерируемых значений:"
_CAPACITY_PROMPT = "Введите число вариантов данных:"


class _Model(Protocol):
    frequencies: list[int]

    def values(self) -> list[Any]: ...

    def generate_value(self) -> Any: ...


def _generate_and_report(model: _Model) -> None:
    """Ask how many values to draw, print them and then their frequencies."""
    amount = read(_U32, _AMOUNT_PROMPT)
    write("\t")
    for _ in range(amount):
        write(str(model.generate_value()))
    print()
    say("Частоты появления значений:")
    for value, frequency in zip(model.values(), model.frequencies):
        say(f"{value} - {frequency}")


def discrete_random_value_modeling_example() -> None:
    """Draw values from a fixed four-value ensemble and print their frequencies."""
    ensemble = RandomEnsemble.from_pairs(
        [("x1", 0.2), ("x2", 0.3), ("x3", 0.45), ("x4", 0.05)]
    )
    _generate_and_report(ensemble)


def markov_chain_modeling_example() -> None:
    """Walk a fixed four-state Markov chain and print the visit frequencies."""
    chain = MarkovChain(
        ["s1", "s2", "s3", "s4"],
        Matrix.from_rows(
            [
                [0.11, 0.36, 0.19, 0.34],
                [0.27, 0.0, 0.45, 0.28],
                [0.35, 0.29, 0.05, 0.31],
                [0.23, 0.48, 0.29, 0.0],
            ]
        ),
        0,
    )
    _generate_and_report(chain)


def discrete_random_value_modeling() -> None:
    """Read probabilities, draw values from them and print their frequencies."""
    capacity = read(_USIZE, _CAPACITY_PROMPT)
    ensemble = RandomEnsemble(capacity)
    for number in range(1, capacity + 1):
        probability = read(float, f"Введите вероятность №{number}:")
        ensemble.insert(f"p{number}", probability)
    ensemble.compile()
    _generate_and_report(ensemble)


def markov_chain_modeling() -> None:
    """Read a transition matrix, walk the chain and print the visit frequencies."""
    capacity = read(_USIZE, _CAPACITY_PROMPT)
    values = [f"s{number}" for number in range(1, capacity + 1)]
    say("Введите матрицу вероятностей, после ввода пропустите одну строку:")
    probabilities = read_matrix(float)
    chain = MarkovChain(values, probabilities, 0)
    _generate_and_report(chain)