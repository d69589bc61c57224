"""Fixed-capacity arrays and small matrix helpers."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple


class CapacityError(Exception):
    """Raised when a fixed-capacity array has no room left."""


class FixedArray:
    """An array with a fixed capacity that supports positional insert and delete."""

    def __init__(self, capacity: int, items: Iterable[int] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        values = list(items)
        if len(values) > capacity:
            raise CapacityError(
                f"{len(values)} items do not fit in capacity {capacity}"
            )
        self.capacity = capacity
        self._items: List[int] = values

    def insert(self, index: int, element: int) -> None:
        """Insert ``element`` at ``index``, shifting later elements right."""
        if len(self._items) >= self.capacity:
            raise CapacityError("array is full")
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert index {index} out of range")
        self._items.insert(index, element)

    def delete(self, index: int) -> int:
        """Remove and return the element at ``index``, shifting later ones left."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"delete index {index} out of range")
        return self._items.pop(index)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __repr__(self) -> str:
        return f"FixedArray(capacity={self.capacity}, items={self._items!r})"


def mean(values: Sequence[float]) -> float:
    """Return the arithmetic mean of ``values``."""
    if not values:
        raise ValueError("mean of an empty sequence")
    return sum(values) / len(values)


Matrix = Sequence[Sequence[int]]


def _shape(matrix: Matrix) -> Tuple[int, int]:
    rows = len(matrix)
    if rows == 0:
        return 0, 0
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows have different lengths")
    return rows, cols


def matrix_add(first: Matrix, second: Matrix) -> List[List[int]]:
    """Return the element-wise sum of two matrices of the same shape."""
    if _shape(first) != _shape(second):
        raise ValueError("matrices must have the same shape")
    return [[a + b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def matrix_multiply(first: Matrix, second: Matrix) -> List[List[int]]:
    """Return the matrix product ``first @ second``."""
    rows, inner = _shape(first)
    inner_second, _ = _shape(second)
    if inner != inner_second:
        raise ValueError("inner dimensions do not match")
    columns = list(zip(*second))
    return [
        [sum(a * b for a, b in zip(row, column)) for column in columns]
        for row in first
    ]


def transpose(matrix: Matrix) -> List[List[int]]:
    """Return the transpose of ``matrix``."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def count_zeros(matrix: Matrix) -> int:
    """Return how many entries of ``matrix`` are zero."""
    _shape(matrix)
    return sum(1 for row in matrix for value in row if value == 0)


def is_sparse(matrix: Matrix) -> bool:
    """Return True when more than half of the entries are zero."""
    rows, cols = _shape(matrix)
    return count_zeros(matrix) > (rows * cols) // 2