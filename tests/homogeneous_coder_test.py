import os
import sys
import numpy as np
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from matrix.HomogeneousCoder import WEIGHT_TOLERANCE, HomogeneousCoder


@pytest.fixture
def square():
    return np.array([[-1.0, -1.0], [1.0, -1.0], [1.0, 1.0], [-1.0, 1.0]])


def test_to_homogeneous_appends_unit_weight(square):
    h = HomogeneousCoder.to_homogeneous(square)
    assert h.shape == (4, 3)
    assert np.all(h[:, -1] == 1.0)
    assert np.array_equal(h[:, :2], square)


def test_empty_in_empty_out():
    assert HomogeneousCoder.to_homogeneous([]).shape == (0, 0)
    assert HomogeneousCoder.from_homogeneous([]).shape == (0, 0)


def test_round_trip_is_exact(square):
    pts = np.array([[0.1, 0.2, 0.3], [1e300, -1e-300, 7.0]])
    assert np.array_equal(HomogeneousCoder.from_homogeneous(HomogeneousCoder.to_homogeneous(pts)), pts)
    assert np.array_equal(HomogeneousCoder.from_homogeneous(HomogeneousCoder.to_homogeneous(square)), square)


def test_perspective_divide():
    out = HomogeneousCoder.from_homogeneous([[2.0, 4.0, 2.0], [3.0, 6.0, -3.0]])
    assert out.tolist() == [[1.0, 2.0], [-1.0, -2.0]]


def test_weight_near_zero_is_not_divided():
    out = HomogeneousCoder.from_homogeneous([[2.0, 4.0, 1e-13], [2.0, 4.0, 0.0]])
    assert out.tolist() == [[2.0, 4.0], [2.0, 4.0]]


def test_weight_above_tolerance_is_divided():
    out = HomogeneousCoder.from_homogeneous([[1e-11, 2e-11, 1e-11]])
    assert np.allclose(out, [[1.0, 2.0]])


def test_weight_near_one_is_not_divided():
    w = 1.0 + WEIGHT_TOLERANCE / 2
    out = HomogeneousCoder.from_homogeneous([[3.0, 5.0, w]])
    assert out.tolist() == [[3.0, 5.0]]


def test_mixed_weights_per_point():
    out = HomogeneousCoder.from_homogeneous([[4.0, 4.0, 2.0], [4.0, 4.0, 0.0], [4.0, 4.0, 1.0]])
    assert out.tolist() == [[2.0, 2.0], [4.0, 4.0], [4.0, 4.0]]
