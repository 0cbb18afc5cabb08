from __future__ import annotations

from typing import Tuple

import matplotlib.pyplot as plt
import numpy as np

from view.view_constants import (
    GRID_AXIS_COLOR,
    GRID_DIVISIONS,
    GRID_LINE_COLOR,
    MARKER_SIZE,
    ORIGINAL_COLOR,
    PLOT_MIN_EXTENT,
    TRANSFORMED_COLOR,
)


class Plot2D:
    @staticmethod
    def column(m: np.ndarray, i: int) -> np.ndarray:
        """Column i of a point matrix, zeros when the points have fewer coordinates."""
        if m.ndim == 2 and i < m.shape[1]:
            return m[:, i]
        return np.zeros(m.shape[0] if m.ndim == 2 else 0)

    @staticmethod
    def bounds(original: np.ndarray, transformed: np.ndarray) -> Tuple[float, float, float, float]:
        """(minx, miny, maxx, maxy) covering every finite point and at least [-5, 5]."""
        xs = np.concatenate([Plot2D.column(original, 0), Plot2D.column(transformed, 0)])
        ys = np.concatenate([Plot2D.column(original, 1), Plot2D.column(transformed, 1)])
        xs = xs[np.isfinite(xs)]
        ys = ys[np.isfinite(ys)]
        minx = min([-PLOT_MIN_EXTENT, *xs])
        maxx = max([PLOT_MIN_EXTENT, *xs])
        miny = min([-PLOT_MIN_EXTENT, *ys])
        maxy = max([PLOT_MIN_EXTENT, *ys])
        return float(minx), float(miny), float(maxx), float(maxy)

    @staticmethod
    def _plot_points(ax, pts: np.ndarray, color: str, marker: str, label: str, connect: bool, close: bool):
        if pts.shape[0] == 0:
            return
        xs = list(Plot2D.column(pts, 0))
        ys = list(Plot2D.column(pts, 1))
        if connect and len(xs) > 1:
            px, py = xs, ys
            if close and len(xs) > 2:
                px, py = xs + xs[:1], ys + ys[:1]
            ax.plot(px, py, color=color, linewidth=1.5)
        ax.scatter(xs, ys, s=MARKER_SIZE ** 2, marker=marker, color=color, label=label, zorder=3)

    @staticmethod
    def draw(ax, original: np.ndarray, transformed: np.ndarray, connect: bool = True, close: bool = True):
        """Draw original (circles) and transformed (squares) points on a 2D axes."""
        ax.clear()
        minx, miny, maxx, maxy = Plot2D.bounds(original, transformed)

        # Grid
        ax.set_xticks(np.linspace(minx, maxx, GRID_DIVISIONS + 1))
        ax.set_yticks(np.linspace(miny, maxy, GRID_DIVISIONS + 1))
        ax.grid(True, color=GRID_LINE_COLOR, linewidth=0.8)
        ax.tick_params(labelsize=7)
        # Axes through the origin
        ax.axhline(0.0, color=GRID_AXIS_COLOR, linewidth=1.0)
        ax.axvline(0.0, color=GRID_AXIS_COLOR, linewidth=1.0)

        Plot2D._plot_points(ax, original, ORIGINAL_COLOR, "o", "original", connect, close)
        Plot2D._plot_points(ax, transformed, TRANSFORMED_COLOR, "s", "transformed", connect, close)

        ax.set_xlim(minx, maxx)
        ax.set_ylim(miny, maxy)
        ax.set_xlabel("X")
        ax.set_ylabel("Y")
        if original.shape[0] or transformed.shape[0]:
            ax.legend(loc="upper right", fontsize=8)

    @staticmethod
    def visualize(original: np.ndarray, transformed: np.ndarray, connect: bool = True, close: bool = True):
        fig = plt.figure(figsize=(8, 6))
        ax = fig.add_subplot(111)
        Plot2D.draw(ax, original, transformed, connect, close)
        plt.tight_layout()
        plt.show()
