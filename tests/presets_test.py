import os
import sys
import numpy as np
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from matrix.MatrixParser import MatrixParser
from matrix.Presets import Presets
from matrix.TransformEngine import TransformEngine


def test_rotation_2d_quarter_turn():
    out = TransformEngine.apply([[1, 0]], Presets.rotation_2d(90), False)
    assert np.allclose(out, [[0, 1]], atol=1e-9)


def test_rotation_2d_h_matches_linear():
    h = Presets.rotation_2d_h(30)
    assert h.shape == (3, 3)
    assert np.allclose(h[:2, :2], Presets.rotation_2d(30))
    assert h[2].tolist() == [0, 0, 1]


@pytest.mark.parametrize("axis, point, expected", [
    ("x", [0, 1, 0], [0, 0, 1]),
    ("y", [0, 0, 1], [1, 0, 0]),
    ("z", [1, 0, 0], [0, 1, 0]),
])
def test_rotation_3d_axes(axis, point, expected):
    out = TransformEngine.apply([point], Presets.rotation_3d(axis, 90), False)
    assert np.allclose(out, [expected], atol=1e-9)


def test_rotation_3d_unknown_axis():
    with pytest.raises(ValueError):
        Presets.rotation_3d("w", 10)


def test_translation_3d_h():
    out = TransformEngine.apply([[1, 1, 1]], Presets.translation_3d_h(0.8, 0.4, 0.2), True)
    assert np.allclose(out, [[1.8, 1.4, 1.2]])


def test_shear_2d():
    assert Presets.shear_2d(0.5, 0.0).tolist() == [[1, 0.5], [0, 1]]
    assert Presets.shear_2d_h(0.5, 0.0).shape == (3, 3)


def test_build_sizes():
    assert Presets.build("scale", "2D", False, sx=2, sy=3).tolist() == [[2, 0], [0, 3]]
    assert Presets.build("scale", "3D", True, sx=2, sy=3, sz=4).shape == (4, 4)
    assert Presets.build("rotation", "3D", False, angle=45, axis="y").shape == (3, 3)


def test_build_linear_translation_is_identity():
    assert np.array_equal(Presets.build("translation", "2D", False, tx=5, ty=5), np.eye(2))
    assert np.array_equal(Presets.build("translation", "3D", False, tx=5, ty=5, tz=5), np.eye(3))


def test_build_rejects_shear_in_3d_and_unknown_kind():
    with pytest.raises(ValueError):
        Presets.build("shear", "3D", True)
    with pytest.raises(ValueError):
        Presets.build("spin", "2D", True)
    with pytest.raises(ValueError):
        Presets.build("scale", "4D", True)


@pytest.mark.parametrize("mode, homogeneous, size", [
    ("2D", True, 3), ("2D", False, 2), ("3D", True, 4), ("3D", False, 3),
])
def test_default_transforms_fit_default_points(mode, homogeneous, size):
    t = MatrixParser.parse(Presets.default_transform(mode, homogeneous))
    assert t.shape == (size, size)
    p = MatrixParser.parse(Presets.default_points(mode))
    assert TransformEngine.apply(p, t, homogeneous).shape == p.shape


def test_scale_h_builders():
    assert Presets.scale_2d_h(2, 3).tolist() == [[2, 0, 0], [0, 3, 0], [0, 0, 1]]
    h = Presets.scale_3d_h(2, 3, 4)
    assert np.diag(h).tolist() == [2, 3, 4, 1]


@pytest.mark.parametrize("kind, mode, params, expected", [
    ("scale", "2D", {"sx": 2, "sy": 3}, Presets.scale_2d_h(2, 3)),
    ("scale", "3D", {"sx": 2, "sy": 3, "sz": 4}, Presets.scale_3d_h(2, 3, 4)),
    ("rotation", "2D", {"angle": 30}, Presets.rotation_2d_h(30)),
    ("rotation", "3D", {"angle": 30, "axis": "x"}, Presets.rotation_3d_h("x", 30)),
    ("shear", "2D", {"shx": 0.5, "shy": 0.25}, Presets.shear_2d_h(0.5, 0.25)),
])
def test_build_homogeneous_matches_builders(kind, mode, params, expected):
    assert np.array_equal(Presets.build(kind, mode, True, **params), expected)


def test_homogeneous_scale_applies_to_points():
    out = TransformEngine.apply([[1, 1, 1]], Presets.build("scale", "3D", True, sx=2, sy=3, sz=4), True)
    assert out.tolist() == [[2.0, 3.0, 4.0]]
