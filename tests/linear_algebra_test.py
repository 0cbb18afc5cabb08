import os
import sys
import numpy as np
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from matrix.LinearAlgebra import LinearAlgebra
from matrix.MatrixErrors import DimensionError, DimensionMismatchError


def test_transpose_rectangular():
    t = LinearAlgebra.transpose([[1, 2, 3], [4, 5, 6]])
    assert t.shape == (3, 2)
    assert t.tolist() == [[1, 4], [2, 5], [3, 6]]


def test_transpose_empty_does_not_throw():
    assert LinearAlgebra.transpose([]).shape == (0, 0)
    assert LinearAlgebra.transpose(np.empty((0, 3))).shape == (0, 0)


def test_transpose_returns_a_copy():
    a = np.array([[1.0, 2.0], [3.0, 4.0]])
    t = LinearAlgebra.transpose(a)
    t[0, 1] = 99.0
    assert a[1, 0] == 3.0


def test_multiply_square():
    c = LinearAlgebra.multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])
    assert c.tolist() == [[19, 22], [43, 50]]


def test_multiply_result_shape():
    c = LinearAlgebra.multiply(np.ones((2, 3)), np.ones((3, 4)))
    assert c.shape == (2, 4)
    assert np.all(c == 3.0)


def test_multiply_dimension_mismatch():
    with pytest.raises(DimensionMismatchError) as info:
        LinearAlgebra.multiply(np.ones((2, 3)), np.ones((2, 2)))
    assert info.value.left == (2, 3)
    assert info.value.right == (2, 2)
    assert "(2x3) * (2x2)" in str(info.value)


def test_multiply_unit_sizes():
    assert LinearAlgebra.multiply([[2]], [[3]]).tolist() == [[6]]
    assert LinearAlgebra.multiply([[1, 2, 3]], [[1], [1], [1]]).tolist() == [[6]]


def test_multiply_zero_inner_dimension_gives_zeros():
    c = LinearAlgebra.multiply(np.empty((2, 0)), np.empty((0, 3)))
    assert c.shape == (2, 3)
    assert np.all(c == 0.0)


def test_multiply_zero_rows_keeps_column_count():
    c = LinearAlgebra.multiply(np.empty((0, 3)), np.ones((3, 2)))
    assert c.shape == (0, 2)


def test_multiply_zero_rows_still_checks_inner_dimension():
    with pytest.raises(DimensionMismatchError) as info:
        LinearAlgebra.multiply(np.empty((0, 3)), np.ones((2, 2)))
    assert info.value.left == (0, 3)


@pytest.mark.parametrize("a_shape, b_shape, expected", [
    ((0, 2), (2, 4), (0, 4)),
    ((3, 0), (0, 1), (3, 1)),
    ((1, 2), (2, 0), (1, 0)),
    ((0, 0), (0, 0), (0, 0)),
])
def test_multiply_zero_size_shapes(a_shape, b_shape, expected):
    c = LinearAlgebra.multiply(np.ones(a_shape), np.ones(b_shape))
    assert c.shape == expected
    assert np.all(c == 0.0)


def test_transpose_still_collapses_zero_rows():
    assert LinearAlgebra.transpose(np.empty((0, 4))).shape == (0, 0)


def test_multiply_zero_outer_dimension():
    c = LinearAlgebra.multiply(np.ones((2, 2)), np.empty((2, 0)))
    assert c.shape == (2, 0)


def test_as_matrix_rejects_ragged_rows():
    with pytest.raises(DimensionError):
        LinearAlgebra.as_matrix([[1, 2], [3]])
