from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

from matrix.MatrixErrors import DimensionError, DimensionMismatchError

MatrixLike = Union[np.ndarray, Sequence[Sequence[float]]]


@dataclass(frozen=True)
class LinearAlgebra:
    @staticmethod
    def empty() -> np.ndarray:
        """The empty matrix: zero rows, zero columns."""
        return np.empty((0, 0), dtype=float)

    @staticmethod
    def as_matrix(a: MatrixLike, keep_shape: bool = False) -> np.ndarray:
        """Copy a nested sequence or array into a fresh 2D float matrix.

        Rows of differing length raise DimensionError. Anything with zero rows
        becomes the empty matrix, unless keep_shape is set, in which case a
        (0, n) array keeps its column count.
        """
        if isinstance(a, np.ndarray):
            m = np.array(a, dtype=float)
            if m.ndim == 1 and m.size == 0:
                return LinearAlgebra.empty()
        else:
            rows = [list(r) for r in a]
            if not rows:
                return LinearAlgebra.empty()
            width = len(rows[0])
            for i, r in enumerate(rows):
                if len(r) != width:
                    raise DimensionError(
                        f"Row {i + 1} has {len(r)} values, expected {width}.")
            m = np.array(rows, dtype=float).reshape(len(rows), width)

        if m.ndim != 2:
            raise DimensionError(f"Expected a 2D matrix, got {m.ndim} dimension(s).")
        if m.shape[0] == 0 and not keep_shape:
            return LinearAlgebra.empty()
        return m

    @staticmethod
    def transpose(a: MatrixLike) -> np.ndarray:
        m = LinearAlgebra.as_matrix(a)
        if m.shape[0] == 0:
            return LinearAlgebra.empty()
        return np.ascontiguousarray(m.T)

    @staticmethod
    def multiply(a: MatrixLike, b: MatrixLike) -> np.ndarray:
        """Matrix product of (m x n) and (p x k); requires n == p.

        Any of m, n, k may be 0: the result is always m x k, all zeros when n is 0.
        """
        left = LinearAlgebra.as_matrix(a, keep_shape=True)
        right = LinearAlgebra.as_matrix(b, keep_shape=True)
        m, n = left.shape
        p, k = right.shape
        if n != p:
            raise DimensionMismatchError((m, n), (p, k))
        return left @ right
