"""Matrix construction, traversals, rotation, transposition and searching."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def _shape(mat: Sequence[Sequence[Any]]) -> tuple[int, int]:
    """Rows and columns of a rectangular matrix; jagged input is rejected."""
    rows = len(mat)
    cols = len(mat[0]) if rows else 0
    if any(len(row) != cols for row in mat):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def _require_square(mat: Sequence[Sequence[Any]]) -> int:
    rows, cols = _shape(mat)
    if rows != cols:
        raise ValueError("matrix must be square")
    return rows


def make_matrix(rows: int, cols: int, fill: Any) -> list[list[Any]]:
    """A ``rows`` x ``cols`` matrix; ``fill`` is a value or a callable of (row, col)."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    make: Callable[[int, int], Any] = fill if callable(fill) else (lambda _i, _j: fill)
    return [[make(i, j) for j in range(cols)] for i in range(rows)]


def flatten(mat: Sequence[Sequence[T]]) -> list[T]:
    """All elements in row-major order; rows may differ in length."""
    return [value for row in mat for value in row]


def snake_order(mat: Sequence[Sequence[T]]) -> list[T]:
    """Even rows left to right, odd rows right to left."""
    order: list[T] = []
    for index, row in enumerate(mat):
        order.extend(row if index % 2 == 0 else reversed(row))
    return order


def median_of_row_sorted(mat: Sequence[Sequence[int]]) -> int:
    """Median of a matrix whose rows are sorted, found by binary search on values.

    The matrix is expected to have an odd number of distinct elements.
    """
    rows, cols = _shape(mat)
    if rows == 0 or cols == 0:
        raise ValueError("matrix must not be empty")
    low = min(row[0] for row in mat)
    high = max(row[-1] for row in mat)
    target = (rows * cols + 1) // 2
    while low < high:
        mid = (low + high) // 2
        if sum(bisect_right(row, mid) for row in mat) < target:
            low = mid + 1
        else:
            high = mid
    return low


def boundary_elements(mat: Sequence[Sequence[T]]) -> list[T]:
    """Outer ring of the matrix, clockwise from the top-left corner."""
    rows, cols = _shape(mat)
    if rows == 0 or cols == 0:
        return []
    if rows == 1:
        return list(mat[0])
    if cols == 1:
        return [row[0] for row in mat]
    ring = list(mat[0])
    ring.extend(mat[i][cols - 1] for i in range(1, rows))
    ring.extend(mat[rows - 1][j] for j in range(cols - 2, -1, -1))
    ring.extend(mat[i][0] for i in range(rows - 2, 0, -1))
    return ring


def rotate90_anticlockwise(mat: Sequence[Sequence[T]]) -> list[list[T]]:
    """A new matrix turned 90 degrees anticlockwise: the last column becomes the first row."""
    _shape(mat)
    return [list(column) for column in zip(*mat)][::-1]


def rotate90_in_place(mat: list[list[Any]]) -> None:
    """Turn a square matrix 90 degrees anticlockwise in place."""
    transpose_in_place(mat)
    mat.reverse()


def search_linear(mat: Sequence[Sequence[T]], x: T) -> tuple[int, int] | None:
    """Position of the first ``x`` in row-major order, or None."""
    for i, row in enumerate(mat):
        for j, value in enumerate(row):
            if value == x:
                return i, j
    return None


def search_sorted(mat: Sequence[Sequence[Any]], x: Any) -> tuple[int, int] | None:
    """Staircase search from the top-right corner of a row- and column-sorted matrix."""
    rows, cols = _shape(mat)
    i, j = 0, cols - 1
    while i < rows and j >= 0:
        value = mat[i][j]
        if value == x:
            return i, j
        if value > x:
            j -= 1
        else:
            i += 1
    return None


def spiral_order(mat: Sequence[Sequence[T]]) -> list[T]:
    """Elements in clockwise spiral order starting at the top-left corner."""
    rows, cols = _shape(mat)
    top, left, bottom, right = 0, 0, rows - 1, cols - 1
    order: list[T] = []
    while top <= bottom and left <= right:
        order.extend(mat[top][left:right + 1])
        top += 1
        order.extend(mat[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            order.extend(mat[bottom][j] for j in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            order.extend(mat[i][left] for i in range(bottom, top - 1, -1))
            left += 1
    return order


def transpose(mat: Sequence[Sequence[T]]) -> list[list[T]]:
    """A new matrix with rows and columns exchanged."""
    _shape(mat)
    return [list(column) for column in zip(*mat)]


def transpose_in_place(mat: list[list[Any]]) -> None:
    """Transpose a square matrix by swapping across the main diagonal."""
    size = _require_square(mat)
    for i in range(size):
        for j in range(i + 1, size):
            mat[i][j], mat[j][i] = mat[j][i], mat[i][j]