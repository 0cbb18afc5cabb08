from mpl_toolkits.mplot3d import Axes3D  # noqa: F401 - ensures 3D support is loaded
import numpy as np
import matplotlib.pyplot as plt

from view.Plot2D import Plot2D
from view.view_constants import (
    GRID_AXIS_COLOR,
    MARKER_SIZE,
    ORIGINAL_COLOR,
    TRANSFORMED_COLOR,
    VIEW_3D_AZIM,
    VIEW_3D_ELEV,
)


class Plot3D:
    @staticmethod
    def equalize_axes(ax):
        """Give all three axes the same span around their current centres."""
        limits = np.array([ax.get_xlim3d(), ax.get_ylim3d(), ax.get_zlim3d()])
        centres = limits.mean(axis=1)
        half = np.ptp(limits, axis=1).max() / 2.0
        ax.set_xlim3d(centres[0] - half, centres[0] + half)
        ax.set_ylim3d(centres[1] - half, centres[1] + half)
        ax.set_zlim3d(centres[2] - half, centres[2] + half)

    @staticmethod
    def reset_view(ax):
        ax.view_init(elev=VIEW_3D_ELEV, azim=VIEW_3D_AZIM)

    @staticmethod
    def _scatter(ax, pts: np.ndarray, color: str, label: str):
        if pts.shape[0] == 0:
            return
        xs, ys, zs = (Plot2D.column(pts, i) for i in range(3))
        ax.scatter(xs, ys, zs, s=MARKER_SIZE ** 2, color=color, label=label, depthshade=False)

    @staticmethod
    def draw(ax, original: np.ndarray, transformed: np.ndarray, show_axes: bool = True):
        """Scatter original and transformed points on a 3D axes."""
        ax.cla()
        Plot3D._scatter(ax, original, ORIGINAL_COLOR, "original")
        Plot3D._scatter(ax, transformed, TRANSFORMED_COLOR, "transformed")

        if show_axes:
            ax.plot([-3, 3], [0, 0], [0, 0], color=GRID_AXIS_COLOR, linewidth=1.0)
            ax.plot([0, 0], [-3, 3], [0, 0], color=GRID_AXIS_COLOR, linewidth=1.0)
            ax.plot([0, 0], [0, 0], [-3, 3], color=GRID_AXIS_COLOR, linewidth=1.0)

        ax.set_xlabel("X")
        ax.set_ylabel("Y")
        ax.set_zlabel("Z")
        Plot3D.reset_view(ax)
        Plot3D.equalize_axes(ax)
        ax.grid(True)
        if original.shape[0] or transformed.shape[0]:
            ax.legend(loc="upper right", fontsize=8)

    @staticmethod
    def visualize(original: np.ndarray, transformed: np.ndarray, show_axes: bool = True):
        """Render original and transformed points in a rotatable 3D view."""
        fig = plt.figure(figsize=(8, 6))
        ax = fig.add_subplot(111, projection='3d')
        Plot3D.draw(ax, original, transformed, show_axes)

        def on_key(event):
            # r: back to the default camera
            if event.key == "r":
                Plot3D.reset_view(ax)
                fig.canvas.draw_idle()

        fig.canvas.mpl_connect("key_press_event", on_key)
        plt.tight_layout()
        plt.show()
