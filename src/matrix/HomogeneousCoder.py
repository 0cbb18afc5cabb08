from dataclasses import dataclass

import numpy as np

from matrix.LinearAlgebra import LinearAlgebra, MatrixLike
from matrix.MatrixErrors import DimensionError

# Weights within this distance of 0 or 1 are returned without a perspective divide
WEIGHT_TOLERANCE = 1e-12


@dataclass(frozen=True)
class HomogeneousCoder:
    @staticmethod
    def to_homogeneous(points: MatrixLike) -> np.ndarray:
        """Append a weight of exactly 1 to every point (d -> d+1)."""
        p = LinearAlgebra.as_matrix(points)
        if p.shape[0] == 0:
            return LinearAlgebra.empty()
        return np.hstack([p, np.ones((p.shape[0], 1), dtype=float)])

    @staticmethod
    def from_homogeneous(points: MatrixLike, tol: float = WEIGHT_TOLERANCE) -> np.ndarray:
        """Project homogeneous points back to Cartesian (d+1 -> d).

        Leading coordinates are divided by the weight w unless w is within tol
        of 1 (nothing to do) or of 0. Points with w ~ 0 keep their leading
        coordinates as-is instead of being sent to infinity.
        """
        p = LinearAlgebra.as_matrix(points)
        if p.shape[0] == 0:
            return LinearAlgebra.empty()
        if p.shape[1] == 0:
            raise DimensionError("Homogeneous points need a weight coordinate.")

        w = p[:, -1]
        c = p[:, :-1].copy()
        divide = (np.abs(w) > tol) & (np.abs(w - 1.0) > tol)
        c[divide] = c[divide] / w[divide][:, np.newaxis]
        return c
