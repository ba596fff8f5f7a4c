import pytest

from arraykit.matrix import add, diagonal_sum, multiply, transpose

A = [[1, 2], [3, 4]]
B = [[5, 6], [7, 8]]
IDENTITY = [[1, 0], [0, 1]]


def test_multiply_example():
    assert multiply(A, B) == [[19, 22], [43, 50]]


def test_multiply_by_identity_is_unchanged():
    assert multiply(A, IDENTITY) == A
    assert multiply(IDENTITY, B) == B


def test_multiply_rectangular_shape():
    left = [[1, 2, 3]]
    right = [[1], [2], [3]]
    result = multiply(left, right)
    assert len(result) == 1 and len(result[0]) == 1


def test_transpose_of_product_reverses_order():
    assert transpose(multiply(A, B)) == multiply(transpose(B), transpose(A))


def test_multiply_dimension_mismatch():
    with pytest.raises(ValueError):
        multiply([[1, 2, 3]], [[1, 2, 3]])


def test_add_example():
    assert add(A, B) == [[6, 8], [10, 12]]


def test_add_is_commutative_and_zero_is_neutral():
    assert add(A, B) == add(B, A)
    assert add(A, [[0, 0], [0, 0]]) == A


def test_add_shape_mismatch():
    with pytest.raises(ValueError):
        add(A, [[1, 2, 3], [4, 5, 6]])


def test_ragged_matrix_rejected():
    with pytest.raises(ValueError):
        add([[1, 2], [3]], [[1, 2], [3]])


def test_diagonal_sum_single_element():
    assert diagonal_sum([[5]]) == 5


def test_diagonal_sum_invariant_under_transpose():
    m = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert diagonal_sum(transpose(m)) == diagonal_sum(m)


def test_diagonal_sum_of_sum_is_sum_of_diagonals():
    assert diagonal_sum(add(A, B)) == diagonal_sum(A) + diagonal_sum(B)


def test_diagonal_sum_requires_square():
    with pytest.raises(ValueError):
        diagonal_sum([[1, 2, 3], [4, 5, 6]])


def test_transpose_example():
    assert transpose(A) == [[1, 3], [2, 4]]


def test_transpose_twice_is_identity():
    m = [[1, 2, 3], [4, 5, 6]]
    assert transpose(transpose(m)) == m


def test_transpose_does_not_modify_input():
    m = [[1, 2], [3, 4]]
    transpose(m)
    assert m == A