"""Choosing an outcome from a table of probabilities."""

from __future__ import annotations

from typing import Sequence


def find_index_of_random_range(
    probability_value: float, probabilities: Sequence[float]
) -> int:
    """Return the index whose cumulative range holds ``probability_value``.

    Ranges are closed, so a value on a boundary belongs to the earlier range;
    a value beyond every range falls to the last index.
    """
    last = len(probabilities) - 1
    left = 0.0
    for index, probability in enumerate(probabilities):
        if left <= probability_value <= left + probability or index >= last:
            return index
        left += probability
    return 0