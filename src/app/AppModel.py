from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

import numpy as np

from export.MatrixExporter import MatrixExporter
from matrix.LinearAlgebra import LinearAlgebra
from matrix.MatrixErrors import MatrixError
from matrix.MatrixParser import MatrixParser
from matrix.Presets import Presets
from matrix.TransformEngine import TransformEngine


@dataclass
class ComputeResult:
    points: np.ndarray
    transformed: np.ndarray
    error: Optional[str] = None


@dataclass
class AppModel:
    """UI state of the visualizer: mode, homogeneous flag and the two text fields."""
    mode: str = "2D"
    homogeneous: bool = True
    points_text: str = field(default_factory=lambda: Presets.default_points("2D"))
    transform_text: str = field(default_factory=lambda: Presets.default_transform("2D", True))

    @property
    def points_label(self) -> str:
        return f"Points (N×{Presets.dimension(self.mode)})"

    @property
    def transform_label(self) -> str:
        n = Presets.dimension(self.mode) + (1 if self.homogeneous else 0)
        return f"Transform ({n}×{n})"

    def set_mode(self, mode: str) -> None:
        Presets.dimension(mode)
        self.mode = mode
        if not self.points_text.strip():
            self.points_text = Presets.default_points(mode)
        self.transform_text = Presets.default_transform(mode, self.homogeneous)

    def set_homogeneous(self, homogeneous: bool) -> None:
        # Swap in a transform of the matching size
        self.homogeneous = bool(homogeneous)
        self.transform_text = Presets.default_transform(self.mode, self.homogeneous)

    def reset_points(self) -> None:
        self.points_text = Presets.default_points(self.mode)

    def reset_transform(self) -> None:
        self.transform_text = Presets.default_transform(self.mode, self.homogeneous)

    def apply_preset(self, kind: str, params: Dict[str, float | str]) -> None:
        m = Presets.build(kind, self.mode, self.homogeneous, **params)
        self.transform_text = MatrixExporter.format_matrix(m)

    def compute(self) -> ComputeResult:
        """Run the transform; empty fields fall back to the defaults for the current mode."""
        points_text = self.points_text or Presets.default_points(self.mode)
        transform_text = self.transform_text or Presets.default_transform(self.mode, self.homogeneous)
        try:
            result = TransformEngine.apply_transform(points_text, transform_text, self.homogeneous)
        except MatrixError as ex:
            return ComputeResult(LinearAlgebra.empty(), LinearAlgebra.empty(), str(ex))
        return ComputeResult(result.points, result.transformed)

    def compute_transform(self) -> np.ndarray:
        transform_text = self.transform_text or Presets.default_transform(self.mode, self.homogeneous)
        return MatrixParser.parse(transform_text)
