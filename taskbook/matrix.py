"""A rectangular matrix stored as a list of rows."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Sequence

from taskbook.tools import InputError, parse_many, read


class MatrixError(ValueError):
    """Raised when rows cannot form a rectangular matrix."""


class Matrix:
    """A matrix whose rows all have the same length."""

    def __init__(self, rows: Iterable[Sequence[Any]] = ()):
        self._rows = [list(row) for row in rows]
        widths = {len(row) for row in self._rows}
        if len(widths) > 1:
            raise MatrixError("Строки матрицы имеют разную длину")
        self._columns = widths.pop() if widths else 0

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]]) -> "Matrix":
        """Build a matrix from rows; they must be non-empty and of equal length."""
        rows = list(rows)
        if not rows:
            raise MatrixError("Не удалось преобразовать набор векторов значений в матрицу")
        try:
            return cls(rows)
        except MatrixError as exc:
            raise MatrixError(
                "Не удалось преобразовать набор векторов значений в матрицу"
            ) from exc

    @classmethod
    def filled(cls, size: tuple[int, int], fill: Any = 0) -> "Matrix":
        """Build a matrix of ``size`` (columns, rows) filled with ``fill``."""
        columns, rows = size
        matrix = cls([fill] * columns for _ in range(rows))
        matrix._columns = columns
        return matrix

    @classmethod
    def parse_from_lines(
        cls, lines: Iterable[str], kind: Callable[[str], Any] = int
    ) -> "Matrix":
        """Parse each line into a row of ``kind`` values."""
        try:
            rows = [parse_many(line, kind) for line in lines]
            return cls.from_rows(rows)
        except (InputError, MatrixError) as exc:
            raise MatrixError("Не удалось преобразовать набор строк в матрицу") from exc

    @property
    def size(self) -> tuple[int, int]:
        """The pair (columns, rows)."""
        return self._columns, len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index: int) -> list:
        return self._rows[index]

    def __setitem__(self, index: int, row: Sequence[Any]) -> None:
        row = list(row)
        if len(row) != self._columns:
            raise MatrixError("Длина строки не совпадает с шириной матрицы")
        self._rows[index] = row

    def __iter__(self) -> Iterator[list]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size == other.size and self._rows == other._rows

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"


def read_matrix(kind: Callable[[str], Any] = int) -> Matrix:
    """Read lines until an empty one and parse them into a matrix."""
    lines = []
    while True:
        try:
            line = read(str)
        except InputError:
            break
        if not line:
            break
        lines.append(line)
    return Matrix.parse_from_lines(lines, kind)