"""Static report of a planned path.

Draws the route points, the fitted curve and the yaw/curvature profiles of
one planning cycle into a single figure.
"""

import os
import numpy as np
import matplotlib

# Non-GUI backend so saving works headless
if os.environ.get("MPLBACKEND") is None:
    matplotlib.use("Agg")

import matplotlib.pyplot as plt
import matplotlib.gridspec as gridspec
from pathlib import Path
from typing import Optional, Sequence, Tuple
from loguru import logger

from ..core.data_structures import PlannedPath, PathPoint
from ..core.geometry import points_to_array


def plot_planned_path(
    path: PlannedPath,
    output_path: str,
    route_points: Optional[Sequence[PathPoint]] = None,
    figsize: Tuple[float, float] = (14, 8),
    dpi: int = 100
) -> Path:
    """Render a planned path and save it as an image.

    Args:
        path: Planned path to draw
        output_path: Image file to write
        route_points: Optional full route geometry drawn underneath
        figsize: Figure size (width, height) in inches
        dpi: Dots per inch for rendered output

    Returns:
        Path of the written image
    """
    if len(path) == 0:
        raise ValueError("Cannot plot a path without sampling points")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    samples = points_to_array(path.sampling_points)
    fig = plt.figure(figsize=figsize, constrained_layout=True)
    gs = gridspec.GridSpec(2, 2, figure=fig)

    # Map
    ax_map = fig.add_subplot(gs[:, 0])
    if route_points:
        route = points_to_array(route_points)
        ax_map.plot(route[:, 0], route[:, 1], color='lightgray', linewidth=4, label='Route')
    if path.points:
        knots = points_to_array(path.points)
        ax_map.plot(knots[:, 0], knots[:, 1], 'ko', markersize=4, label='Downsampled points')
    if path.curve is not None:
        dense = points_to_array(path.curve.sample(_dense_spacing(path.curve.parameters)))
        ax_map.plot(dense[:, 0], dense[:, 1], 'g-', label='Fitted curve')
    ax_map.plot(samples[:, 0], samples[:, 1], 'b.', label='Samples')
    ax_map.set_xlabel("x [m]")
    ax_map.set_ylabel("y [m]")
    ax_map.set_aspect('equal')
    ax_map.grid(True, alpha=0.3)
    ax_map.legend()

    indices = np.arange(len(path))

    ax_yaw = fig.add_subplot(gs[0, 1])
    ax_yaw.plot(indices, path.yaw, color='blue')
    ax_yaw.set_title("Yaw")
    ax_yaw.set_ylabel("Yaw [rad]")
    ax_yaw.grid(True, alpha=0.3)

    ax_curv = fig.add_subplot(gs[1, 1])
    ax_curv.plot(indices, path.curvature, color='purple', label='Chord estimate')
    if path.curve is not None and len(path.curve.parameters) == len(path):
        analytic = np.abs(path.curve.calc_curvature(np.asarray(path.curve.parameters)))
        ax_curv.plot(indices, analytic, color='orange', linestyle='--', label='Spline')
    ax_curv.set_title("Curvature")
    ax_curv.set_xlabel("Sample index")
    ax_curv.set_ylabel("Curvature [1/m]")
    ax_curv.grid(True, alpha=0.3)
    ax_curv.legend()

    fig.suptitle("In-Lane Cruising Path", fontsize=16)
    plt.savefig(output_path, dpi=dpi)
    plt.close(fig)
    logger.info(f"Path plot saved to {output_path}")

    return output_path


def _dense_spacing(parameters: Sequence[float], n_samples: int = 200) -> float:
    span = parameters[-1] - parameters[0]
    return span / n_samples
