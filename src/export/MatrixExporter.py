import json
import math
import sys
from dataclasses import dataclass
from typing import Optional

import numpy as np

from matrix.TransformEngine import TransformResult

EMPTY_PLACEHOLDER = "—"


@dataclass
class MatrixExporter:

    @staticmethod
    def format_value(v: float) -> str:
        """Integral values without a fraction, anything else with full float precision."""
        v = float(v)
        if math.isinf(v):
            return "Infinity" if v > 0 else "-Infinity"
        if math.isnan(v):
            return "NaN"
        if v.is_integer():
            return str(int(v))
        return repr(v)

    @staticmethod
    def format_matrix(m: np.ndarray, sep: str = " ") -> str:
        """One row per line; text that parses back to the same matrix."""
        return "\n".join(sep.join(MatrixExporter.format_value(v) for v in row) for row in m)

    @staticmethod
    def format_text(m: np.ndarray) -> str:
        """Tab separated numeric display, a dash for the empty matrix."""
        return MatrixExporter.format_matrix(m, sep="\t") or EMPTY_PLACEHOLDER

    @staticmethod
    def _write(data: str, path: str) -> None:
        if path == "-" or path == "stdout":
            sys.stdout.write(data)
        else:
            with open(path, "w", encoding="utf-8") as f:
                f.write(data)

    @staticmethod
    def export_json(result: TransformResult, path: str, mode: str, homogeneous: bool,
                    transform: Optional[np.ndarray] = None) -> None:
        """Export as JSON: { "mode", "homogeneous", "transform", "points", "transformed" }"""
        obj = {
            "mode": mode,
            "homogeneous": bool(homogeneous),
            "transform": None if transform is None else np.asarray(transform, dtype=float).tolist(),
            "points": result.points.tolist(),
            "transformed": result.transformed.tolist(),
        }
        data = json.dumps(obj, ensure_ascii=False, indent=4, separators=(",", ":"))
        MatrixExporter._write(data + "\n", path)

    @staticmethod
    def export_txt(result: TransformResult, path: str) -> None:
        """Export text: transformed points, one per line, tab separated."""
        data = MatrixExporter.format_matrix(result.transformed, sep="\t")
        MatrixExporter._write(data + "\n", path)
