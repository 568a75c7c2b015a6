"""An ensemble of values, each drawn with its own probability."""

from __future__ import annotations

import random
from typing import Any, Iterable, Optional

from taskbook.sampling import find_index_of_random_range


class EnsembleError(ValueError):
    """Raised when an ensemble cannot be compiled."""


class NotCompiledError(RuntimeError):
    """Raised when an ensemble is used before it is compiled."""


class RandomEnsemble:
    """Values with probabilities, and counts of how often each was drawn."""

    def __init__(self, capacity: Optional[int] = None, rng: Optional[random.Random] = None):
        self._capacity = capacity
        self._rng = rng if rng is not None else random.Random()
        self._compiled = False
        self._values: list[Any] = []
        self._probabilities: list[float] = []
        self.frequencies: list[int] = []

    def insert(self, value: Any, probability: float) -> None:
        """Add a value with its probability."""
        self._values.append(value)
        self._probabilities.append(probability)
        self.frequencies.append(0)

    def compile(self) -> None:
        """Check the ensemble is complete and its probabilities sum to one."""
        if self._capacity is not None and len(self._values) != self._capacity:
            raise EnsembleError("Ансамбль значений заполнен не до конца")
        if not 0.9999 <= sum(self._probabilities) <= 1.0001:
            raise EnsembleError(
                "Погрешность сумм вероятностей составляет более одной десятитысячной"
            )
        self._compiled = True

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[Any, float]], rng: Optional[random.Random] = None
    ) -> "RandomEnsemble":
        """Build and compile an ensemble from (value, probability) pairs."""
        pairs = list(pairs)
        ensemble = cls(len(pairs), rng)
        for value, probability in pairs:
            ensemble.insert(value, probability)
        ensemble.compile()
        return ensemble

    def _check_compiled(self) -> None:
        if not self._compiled:
            raise NotCompiledError("Ансамбль не скомпилирован.")

    def __len__(self) -> int:
        self._check_compiled()
        return len(self._values)

    def values(self) -> list[Any]:
        """The values of the ensemble."""
        self._check_compiled()
        return list(self._values)

    def probabilities(self) -> list[float]:
        """The probabilities of the values."""
        self._check_compiled()
        return list(self._probabilities)

    def generate_value(self) -> Any:
        """Draw a value and count it."""
        self._check_compiled()
        probability_value = 1.0 - self._rng.random()
        index = find_index_of_random_range(probability_value, self._probabilities)
        self.frequencies[index] += 1
        return self._values[index]