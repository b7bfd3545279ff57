"""Square matrices that store only the cells that may be non-zero."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from itertools import product


class _PackedSquareMatrix(ABC):
    """An n x n integer matrix keeping only its non-zero band in a flat list."""

    def __init__(self, dimension: int = 2) -> None:
        if dimension < 0:
            raise ValueError(f"dimension {dimension} cannot be negative")
        self.dimension = dimension
        self._values = [0] * self._storage_size(dimension)

    @staticmethod
    def _storage_size(dimension: int) -> int:
        return dimension * (dimension + 1) // 2

    @abstractmethod
    def _in_band(self, i: int, j: int) -> bool:
        """Whether cell ``(i, j)`` is stored rather than fixed at zero."""

    @abstractmethod
    def _offset(self, i: int, j: int) -> int:
        """Position of the stored cell ``(i, j)`` in the flat storage."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dimension={self.dimension}, rows={self.rows()!r})"

    def _check(self, i: int, j: int) -> None:
        if not (0 <= i < self.dimension and 0 <= j < self.dimension):
            raise IndexError(
                f"cell ({i}, {j}) is outside a {self.dimension}x{self.dimension} matrix"
            )

    def _stored_index(self, i: int, j: int) -> int:
        self._check(i, j)
        if not self._in_band(i, j):
            raise ValueError(f"cell ({i}, {j}) is always zero and is not stored")
        return self._offset(i, j)

    def set(self, i: int, j: int, value: int) -> None:
        """Store ``value`` at row ``i``, column ``j``; cells fixed at zero are left alone."""
        self._check(i, j)
        if self._in_band(i, j):
            self._values[self._offset(i, j)] = value

    def get(self, i: int, j: int) -> int:
        """The value at row ``i``, column ``j``."""
        self._check(i, j)
        if self._in_band(i, j):
            return self._values[self._offset(i, j)]
        return 0

    def rows(self) -> list[list[int]]:
        """The full matrix, zeros included, as a list of rows."""
        size = range(self.dimension)
        return [[self.get(i, j) for j in size] for i in size]

    def render(self, separator: str = " ") -> str:
        """The full matrix as text, one row per line."""
        return "\n".join(
            separator.join(str(value) for value in row) for row in self.rows()
        )


class DiagonalMatrix(_PackedSquareMatrix):
    """A matrix whose only non-zero cells lie on the main diagonal."""

    def __init__(self, dimension: int = 2) -> None:
        super().__init__(dimension)

    @staticmethod
    def _storage_size(dimension: int) -> int:
        return dimension

    def _in_band(self, i: int, j: int) -> bool:
        return i == j

    def _offset(self, i: int, j: int) -> int:
        return i

    def set(self, i: int, j: int, value: int) -> None:
        """Store ``value`` on the diagonal; off-diagonal cells stay zero."""
        super().set(i, j, value)

    def get(self, i: int, j: int) -> int:
        """The value at row ``i``, column ``j``."""
        return super().get(i, j)

    def rows(self) -> list[list[int]]:
        """The full matrix, zeros included, as a list of rows."""
        return super().rows()

    def render(self, separator: str = " ") -> str:
        """The full matrix as text, one row per line."""
        return super().render(separator)


class LowerTriangularMatrix(_PackedSquareMatrix):
    """A matrix whose non-zero cells lie on or below the main diagonal."""

    def __init__(self, dimension: int = 2) -> None:
        super().__init__(dimension)

    def _in_band(self, i: int, j: int) -> bool:
        return i >= j

    def _offset(self, i: int, j: int) -> int:
        return i * (i + 1) // 2 + j

    def index(self, i: int, j: int) -> int:
        """Row-major position of the stored cell ``(i, j)`` in the flat storage."""
        return self._stored_index(i, j)

    def set(self, i: int, j: int, value: int) -> None:
        """Store ``value`` on or below the diagonal; other cells stay zero."""
        super().set(i, j, value)

    def get(self, i: int, j: int) -> int:
        """The value at row ``i``, column ``j``."""
        return super().get(i, j)

    def rows(self) -> list[list[int]]:
        """The full matrix, zeros included, as a list of rows."""
        return super().rows()

    def render(self, separator: str = " ") -> str:
        """The full matrix as text, one row per line."""
        return super().render(separator)


class UpperTriangularMatrix(_PackedSquareMatrix):
    """A matrix whose non-zero cells lie on or above the main diagonal."""

    def __init__(self, dimension: int = 2) -> None:
        super().__init__(dimension)

    def _in_band(self, i: int, j: int) -> bool:
        return i <= j

    def _offset(self, i: int, j: int) -> int:
        return i * self.dimension - i * (i - 1) // 2 + (j - i)

    def index(self, i: int, j: int) -> int:
        """Row-major position of the stored cell ``(i, j)`` in the flat storage."""
        return self._stored_index(i, j)

    def set(self, i: int, j: int, value: int) -> None:
        """Store ``value`` on or above the diagonal; other cells stay zero."""
        super().set(i, j, value)

    def get(self, i: int, j: int) -> int:
        """The value at row ``i``, column ``j``."""
        return super().get(i, j)

    def rows(self) -> list[list[int]]:
        """The full matrix, zeros included, as a list of rows."""
        return super().rows()

    def render(self, separator: str = " ") -> str:
        """The full matrix as text, one row per line."""
        return super().render(separator)


def fill_random(
    matrix: _PackedSquareMatrix,
    low: int = 1,
    high: int = 99,
    rng: random.Random | None = None,
) -> None:
    """Fill every storable cell of ``matrix`` with a random value in ``[low, high]``."""
    if low > high:
        raise ValueError(f"low {low} is greater than high {high}")
    generator = rng if rng is not None else random.Random()
    for i, j in product(range(matrix.dimension), repeat=2):
        if matrix._in_band(i, j):
            matrix.set(i, j, generator.randint(low, high))