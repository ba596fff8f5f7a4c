"""Basic operations on matrices stored as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[int]]


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return (rows, columns), rejecting ragged matrices."""
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the matrix product of ``a`` and ``b``."""
    a_rows, a_cols = _shape(a)
    b_rows, b_cols = _shape(b)
    if a_cols != b_rows:
        raise ValueError(
            f"cannot multiply a {a_rows}x{a_cols} matrix by a {b_rows}x{b_cols} matrix"
        )
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in a
    ]


def add(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the element-wise sum of two matrices of the same shape."""
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same shape to be added")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def diagonal_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Return the sum of the main diagonal of a square matrix."""
    rows, cols = _shape(matrix)
    if rows != cols:
        raise ValueError("the main diagonal is defined for square matrices only")
    return sum(row[i] for i, row in enumerate(matrix))


def transpose(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return the transpose of ``matrix``."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]