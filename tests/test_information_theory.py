import io
import re

import pytest

from taskbook.information_theory import (
    discrete_random_value_modeling,
    discrete_random_value_modeling_example,
    markov_chain_modeling,
    markov_chain_modeling_example,
)
from taskbook.markov_chain import MarkovChainError
from taskbook.random_ensemble import EnsembleError
from taskbook.tools import InputError

FREQUENCY_LINE = re.compile(r"^\t(\w+) - (\d+)$", re.MULTILINE)


def feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def frequencies(output):
    return {name: int(count) for name, count in FREQUENCY_LINE.findall(output)}


def test_ensemble_example_frequencies_sum_to_amount(monkeypatch, capsys):
    feed(monkeypatch, "100\n")
    discrete_random_value_modeling_example()
    result = frequencies(capsys.readouterr().out)
    assert list(result) == ["x1", "x2", "x3", "x4"]
    assert sum(result.values()) == 100


def test_ensemble_example_prints_drawn_values(monkeypatch, capsys):
    feed(monkeypatch, "50\n")
    discrete_random_value_modeling_example()
    out = capsys.readouterr().out
    first_line = out.splitlines()[0]
    drawn = first_line.rsplit("\t", 1)[1]
    assert len(re.findall(r"x[1-4]", drawn)) == 50
    assert "Частоты появления значений:" in out


def test_ensemble_example_zero_draws(monkeypatch, capsys):
    feed(monkeypatch, "0\n")
    discrete_random_value_modeling_example()
    result = frequencies(capsys.readouterr().out)
    assert set(result.values()) == {0}
    assert len(result) == 4


def test_ensemble_example_rejects_negative_amount(monkeypatch):
    feed(monkeypatch, "-5\n")
    with pytest.raises(InputError):
        discrete_random_value_modeling_example()


def test_markov_example_frequencies_sum_to_amount(monkeypatch, capsys):
    feed(monkeypatch, "200\n")
    markov_chain_modeling_example()
    result = frequencies(capsys.readouterr().out)
    assert list(result) == ["s1", "s2", "s3", "s4"]
    assert sum(result.values()) == 200


def test_discrete_modeling_with_read_probabilities(monkeypatch, capsys):
    feed(monkeypatch, "3\n0.5\n0.5\n0\n40\n")
    discrete_random_value_modeling()
    result = frequencies(capsys.readouterr().out)
    assert list(result) == ["p1", "p2", "p3"]
    assert sum(result.values()) == 40
    assert result["p3"] == 0


def test_discrete_modeling_certain_value(monkeypatch, capsys):
    feed(monkeypatch, "2\n1\n0\n7\n")
    discrete_random_value_modeling()
    result = frequencies(capsys.readouterr().out)
    assert result == {"p1": 7, "p2": 0}


def test_discrete_modeling_rejects_bad_sum(monkeypatch):
    feed(monkeypatch, "2\n0.5\n0.2\n")
    with pytest.raises(EnsembleError):
        discrete_random_value_modeling()


def test_discrete_modeling_rejects_bad_probability(monkeypatch):
    feed(monkeypatch, "2\nabc\n")
    with pytest.raises(InputError):
        discrete_random_value_modeling()


def test_markov_modeling_alternating_chain(monkeypatch, capsys):
    feed(monkeypatch, "2\n0 1\n1 0\n\n6\n")
    markov_chain_modeling()
    out = capsys.readouterr().out
    assert "s2s1s2s1s2s1" in out
    assert frequencies(out) == {"s1": 3, "s2": 3}


def test_markov_modeling_rejects_size_mismatch(monkeypatch):
    feed(monkeypatch, "3\n0 1\n1 0\n\n")
    with pytest.raises(MarkovChainError):
        markov_chain_modeling()