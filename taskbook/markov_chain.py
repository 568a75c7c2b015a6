"""A Markov chain driven by a square matrix of transition probabilities."""

from __future__ import annotations

import random
from typing import Any, Optional, Sequence

from taskbook.sampling import find_index_of_random_range


class MarkovChainError(ValueError):
    """Raised when a chain cannot be built from its values and matrix."""


class MarkovChain:
    """States with transition probabilities, and counts of visits to each state.

    Row sums of the matrix are not checked.
    """

    def __init__(
        self,
        values: Sequence[Any],
        probabilities: Sequence[Sequence[float]],
        current_state: int = 0,
        rng: Optional[random.Random] = None,
    ):
        if len(values) != len(probabilities):
            raise MarkovChainError("Размеры матрицы вероятностей и элементов не совпадают")
        if len(probabilities) == 0:
            raise MarkovChainError("Матрица вероятностей пуста")
        if len(probabilities) != len(probabilities[0]):
            raise MarkovChainError("Матрица не квадратная")
        if not 0 <= current_state < len(values):
            raise MarkovChainError("Текущее состояние не входит в отрезок [0,1]")
        self._values = list(values)
        self._probabilities = [list(row) for row in probabilities]
        self._rng = rng if rng is not None else random.Random()
        self.current_state = current_state
        self.frequencies = [0] * len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def values(self) -> list[Any]:
        """The states of the chain."""
        return list(self._values)

    def generate_value(self) -> Any:
        """Move to the next state and return its value."""
        probability_value = 1.0 - self._rng.random()
        index = find_index_of_random_range(
            probability_value, self._probabilities[self.current_state]
        )
        self.current_state = index
        self.frequencies[index] += 1
        return self._values[index]