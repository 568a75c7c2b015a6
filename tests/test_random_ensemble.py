import random

import pytest

from taskbook.random_ensemble import EnsembleError, NotCompiledError, RandomEnsemble

PAIRS = [("x1", 0.2), ("x2", 0.3), ("x3", 0.45), ("x4", 0.05)]


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_from_pairs_keeps_values_and_probabilities():
    ensemble = RandomEnsemble.from_pairs(PAIRS)
    assert ensemble.values() == [value for value, _ in PAIRS]
    assert ensemble.probabilities() == [p for _, p in PAIRS]
    assert len(ensemble) == len(PAIRS)
    assert ensemble.frequencies == [0] * len(PAIRS)


def test_bad_probability_sum():
    with pytest.raises(EnsembleError):
        RandomEnsemble.from_pairs([("a", 0.5), ("b", 0.4)])


def test_incomplete_ensemble():
    ensemble = RandomEnsemble(3)
    ensemble.insert("a", 0.5)
    ensemble.insert("b", 0.5)
    with pytest.raises(EnsembleError):
        ensemble.compile()


def test_manual_fill_then_compile():
    ensemble = RandomEnsemble(2)
    ensemble.insert("p1", 0.5)
    ensemble.insert("p2", 0.5)
    ensemble.compile()
    assert ensemble.values() == ["p1", "p2"]


def test_use_before_compile():
    ensemble = RandomEnsemble(1)
    ensemble.insert("a", 1.0)
    with pytest.raises(NotCompiledError):
        len(ensemble)
    with pytest.raises(NotCompiledError):
        ensemble.generate_value()


def test_generate_with_fixed_draw():
    ensemble = RandomEnsemble.from_pairs(PAIRS, FixedRandom(0.9))
    assert ensemble.generate_value() == "x1"
    assert ensemble.frequencies[0] == 1


def test_frequencies_count_every_draw():
    ensemble = RandomEnsemble.from_pairs(PAIRS, random.Random(1))
    drawn = [ensemble.generate_value() for _ in range(200)]
    assert sum(ensemble.frequencies) == len(drawn)
    for value, count in zip(ensemble.values(), ensemble.frequencies):
        assert drawn.count(value) == count


def test_zero_probability_value_never_drawn():
    ensemble = RandomEnsemble.from_pairs([("never", 0.0), ("always", 1.0)], random.Random(7))
    assert {ensemble.generate_value() for _ in range(100)} == {"always"}