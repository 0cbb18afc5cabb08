from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np

from matrix.HomogeneousCoder import HomogeneousCoder
from matrix.LinearAlgebra import LinearAlgebra, MatrixLike
from matrix.MatrixErrors import DimensionError, ShapeError
from matrix.MatrixParser import MatrixParser

MatrixInput = Union[str, MatrixLike]


@dataclass(frozen=True)
class TransformResult:
    points: np.ndarray
    transformed: np.ndarray


@dataclass(frozen=True)
class TransformEngine:
    @staticmethod
    def _as_points(points: MatrixLike) -> np.ndarray:
        try:
            return LinearAlgebra.as_matrix(points)
        except DimensionError as ex:
            raise DimensionError(f"All points must have same dimension. {ex}") from None

    @staticmethod
    def _as_transform(transform: MatrixLike, size: int, mode: str) -> np.ndarray:
        message = f"For {mode} mode, transform must be {size}x{size}."
        try:
            t = LinearAlgebra.as_matrix(transform)
        except DimensionError:
            raise ShapeError(message, required=(size, size)) from None
        if t.shape != (size, size):
            raise ShapeError(
                f"{message} Got {t.shape[0]}x{t.shape[1]}.",
                required=(size, size),
                actual=(t.shape[0], t.shape[1]),
            )
        return t

    @staticmethod
    def apply(points: MatrixLike, transform: MatrixLike, use_homogeneous: bool) -> np.ndarray:
        """Transform each point p into T . p, keeping the input order.

        In homogeneous mode T is (d+1)x(d+1) and results are projected back to
        d dimensions; in linear mode T is d x d.
        """
        p = TransformEngine._as_points(points)
        if p.shape[0] == 0:
            return LinearAlgebra.empty()
        d = p.shape[1]
        if d == 0:
            raise DimensionError("Points must have at least one coordinate.")

        if use_homogeneous:
            t = TransformEngine._as_transform(transform, d + 1, "homogeneous")
            h = HomogeneousCoder.to_homogeneous(p)
            r = LinearAlgebra.transpose(LinearAlgebra.multiply(t, LinearAlgebra.transpose(h)))
            return HomogeneousCoder.from_homogeneous(r)

        t = TransformEngine._as_transform(transform, d, "linear")
        return LinearAlgebra.transpose(LinearAlgebra.multiply(t, LinearAlgebra.transpose(p)))

    @staticmethod
    def apply_transform(points: MatrixInput, transform: MatrixInput, use_homogeneous: bool) -> TransformResult:
        """Parse (when given text) and apply a transform; returns original and transformed points."""
        p = MatrixParser.parse(points) if isinstance(points, str) else TransformEngine._as_points(points)
        t = MatrixParser.parse(transform) if isinstance(transform, str) else transform
        return TransformResult(points=p, transformed=TransformEngine.apply(p, t, use_homogeneous))
