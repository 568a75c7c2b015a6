import io
import sys

import pytest

from taskbook.matrix import Matrix, MatrixError, read_matrix


def test_from_rows_keeps_rows_and_size():
    rows = [[1, 2, 3], [4, 5, 6]]
    matrix = Matrix.from_rows(rows)
    assert list(matrix) == rows
    assert matrix.size == (len(rows[0]), len(rows))
    assert len(matrix) == len(rows)


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(MatrixError):
        Matrix.from_rows([[1, 2], [3]])


def test_from_rows_rejects_empty():
    with pytest.raises(MatrixError):
        Matrix.from_rows([])


def test_indexing_returns_row():
    matrix = Matrix.from_rows([[1, 2], [3, 4]])
    assert matrix[1] == [3, 4]
    matrix[1][0] = 9
    assert matrix[1] == [9, 4]


def test_setitem_checks_width():
    matrix = Matrix.from_rows([[1, 2], [3, 4]])
    matrix[0] = [7, 8]
    assert matrix[0] == [7, 8]
    with pytest.raises(MatrixError):
        matrix[0] = [1, 2, 3]


def test_filled():
    matrix = Matrix.filled((3, 2))
    assert matrix.size == (3, 2)
    assert all(value == 0 for row in matrix for value in row)


def test_parse_from_lines_round_trip():
    rows = [[1, 0, 0], [1, 1, 0]]
    lines = [" ".join(str(v) for v in row) for row in rows]
    assert list(Matrix.parse_from_lines(lines)) == rows


def test_parse_from_lines_floats():
    matrix = Matrix.parse_from_lines(["0.5 0.5", "0.25 0.75"], float)
    assert matrix[1] == [0.25, 0.75]


def test_parse_from_lines_errors():
    with pytest.raises(MatrixError):
        Matrix.parse_from_lines(["1 2", "3 x"])
    with pytest.raises(MatrixError):
        Matrix.parse_from_lines(["1 2", "3"])
    with pytest.raises(MatrixError):
        Matrix.parse_from_lines([])


def test_equality():
    assert Matrix.from_rows([[1, 2]]) == Matrix.from_rows([[1, 2]])
    assert not Matrix.from_rows([[1, 2]]) == Matrix.from_rows([[2, 1]])


def test_read_matrix_stops_at_empty_line(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1 2\n3 4\n\n5 6\n"))
    assert list(read_matrix()) == [[1, 2], [3, 4]]


def test_read_matrix_stops_at_end_of_input(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1 2\n3 4\n"))
    assert list(read_matrix()) == [[1, 2], [3, 4]]