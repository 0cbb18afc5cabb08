import math
from dataclasses import dataclass

import numpy as np

AXES = ("x", "y", "z")

DEFAULT_POINTS = {
    "2D": "-1 -1\n1 -1\n1 1\n-1 1",
    "3D": "-1 -1 -1\n1 -1 -1\n1 1 -1\n-1 1 -1\n-1 -1 1\n1 -1 1\n1 1 1\n-1 1 1",
}

# Keyed by (mode, homogeneous)
DEFAULT_TRANSFORMS = {
    ("2D", True): "1 0 1.2\n0 1 0.4\n0 0 1",
    ("2D", False): "1 0\n0 1",
    ("3D", True): "1 0 0 0.8\n0 1 0 0.4\n0 0 1 0.2\n0 0 0 1",
    ("3D", False): "1 0 0\n0 1 0\n0 0 1",
}


@dataclass(frozen=True)
class Presets:
    """Preset transform matrices. Angles are in degrees, points are column vectors."""

    @staticmethod
    def dimension(mode: str) -> int:
        if mode == "2D":
            return 2
        if mode == "3D":
            return 3
        raise ValueError(f"Unknown mode: {mode!r}")

    @staticmethod
    def default_points(mode: str) -> str:
        Presets.dimension(mode)
        return DEFAULT_POINTS[mode]

    @staticmethod
    def default_transform(mode: str, homogeneous: bool) -> str:
        Presets.dimension(mode)
        return DEFAULT_TRANSFORMS[(mode, bool(homogeneous))]

    @staticmethod
    def identity(size: int) -> np.ndarray:
        return np.eye(size, dtype=float)

    @staticmethod
    def lift(m: np.ndarray) -> np.ndarray:
        """Embed a d x d linear map in the top-left of a (d+1)x(d+1) identity."""
        n = m.shape[0]
        h = np.eye(n + 1, dtype=float)
        h[:n, :n] = m
        return h

    @staticmethod
    def rotation_2d(angle_deg: float) -> np.ndarray:
        a = math.radians(angle_deg)
        cos_a, sin_a = math.cos(a), math.sin(a)
        return np.array([[cos_a, -sin_a], [sin_a, cos_a]], dtype=float)

    @staticmethod
    def rotation_2d_h(angle_deg: float) -> np.ndarray:
        return Presets.lift(Presets.rotation_2d(angle_deg))

    @staticmethod
    def rotation_3d(axis: str, angle_deg: float) -> np.ndarray:
        a = math.radians(angle_deg)
        c, s = math.cos(a), math.sin(a)
        if axis == "x":
            return np.array([[1, 0, 0], [0, c, -s], [0, s, c]], dtype=float)
        if axis == "y":
            return np.array([[c, 0, s], [0, 1, 0], [-s, 0, c]], dtype=float)
        if axis == "z":
            return np.array([[c, -s, 0], [s, c, 0], [0, 0, 1]], dtype=float)
        raise ValueError(f"Unknown rotation axis: {axis!r}")

    @staticmethod
    def rotation_3d_h(axis: str, angle_deg: float) -> np.ndarray:
        return Presets.lift(Presets.rotation_3d(axis, angle_deg))

    @staticmethod
    def scale_2d(sx: float, sy: float) -> np.ndarray:
        return np.diag([sx, sy]).astype(float)

    @staticmethod
    def scale_2d_h(sx: float, sy: float) -> np.ndarray:
        return Presets.lift(Presets.scale_2d(sx, sy))

    @staticmethod
    def scale_3d(sx: float, sy: float, sz: float) -> np.ndarray:
        return np.diag([sx, sy, sz]).astype(float)

    @staticmethod
    def scale_3d_h(sx: float, sy: float, sz: float) -> np.ndarray:
        return Presets.lift(Presets.scale_3d(sx, sy, sz))

    @staticmethod
    def translation_2d_h(tx: float, ty: float) -> np.ndarray:
        m = np.eye(3)
        m[0, 2] = tx
        m[1, 2] = ty
        return m

    @staticmethod
    def translation_3d_h(tx: float, ty: float, tz: float) -> np.ndarray:
        m = np.eye(4)
        m[0, 3] = tx
        m[1, 3] = ty
        m[2, 3] = tz
        return m

    @staticmethod
    def shear_2d(shx: float, shy: float) -> np.ndarray:
        return np.array([[1, shx], [shy, 1]], dtype=float)

    @staticmethod
    def shear_2d_h(shx: float, shy: float) -> np.ndarray:
        return Presets.lift(Presets.shear_2d(shx, shy))

    @staticmethod
    def build(kind: str, mode: str, homogeneous: bool,
              angle: float = 0.0, axis: str = "z",
              sx: float = 1.0, sy: float = 1.0, sz: float = 1.0,
              tx: float = 0.0, ty: float = 0.0, tz: float = 0.0,
              shx: float = 0.0, shy: float = 0.0) -> np.ndarray:
        """Build a preset matrix sized for the mode: d x d, or (d+1)x(d+1) when homogeneous."""
        d = Presets.dimension(mode)
        h = bool(homogeneous)

        if kind == "rotation":
            if d == 2:
                return Presets.rotation_2d_h(angle) if h else Presets.rotation_2d(angle)
            return Presets.rotation_3d_h(axis, angle) if h else Presets.rotation_3d(axis, angle)
        if kind == "scale":
            if d == 2:
                return Presets.scale_2d_h(sx, sy) if h else Presets.scale_2d(sx, sy)
            return Presets.scale_3d_h(sx, sy, sz) if h else Presets.scale_3d(sx, sy, sz)
        if kind == "translation":
            # Translation is not linear; the linear-mode preset is the identity
            if not h:
                return Presets.identity(d)
            return Presets.translation_2d_h(tx, ty) if d == 2 else Presets.translation_3d_h(tx, ty, tz)
        if kind == "shear":
            if d != 2:
                raise ValueError("Shear preset is only available in 2D mode.")
            return Presets.shear_2d_h(shx, shy) if h else Presets.shear_2d(shx, shy)
        raise ValueError(f"Unknown preset: {kind!r}")
