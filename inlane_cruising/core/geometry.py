"""Planar geometry utilities.

Distances, angle wrapping and nearest-point search on ordered point
sequences in the inertial frame.
"""

import math
import numpy as np
from typing import Sequence, Union

from .data_structures import PathPoint, PointSpeedPair, PositionLike, as_path_point


def distance2d(a: PathPoint, b: PathPoint) -> float:
    """Euclidean distance between two points in the plane."""
    return math.hypot(b.x - a.x, b.y - a.y)


def points_to_array(points: Sequence[Union[PathPoint, PointSpeedPair]]) -> np.ndarray:
    """Stack points (or the positions of point/speed pairs) into an (n, 2) array."""
    if len(points) == 0:
        return np.empty((0, 2))
    return np.array([
        (p.point.x, p.point.y) if isinstance(p, PointSpeedPair) else (p.x, p.y)
        for p in points
    ], dtype=float)


def cumulative_distance(xy: np.ndarray) -> np.ndarray:
    """Cumulative chord length along an (n, 2) polyline, starting at 0."""
    if len(xy) == 0:
        return np.empty(0)
    ds = np.hypot(np.diff(xy[:, 0]), np.diff(xy[:, 1]))
    return np.concatenate(([0.0], np.cumsum(ds)))


def nearest_point_index(
    points: Sequence[Union[PathPoint, PointSpeedPair]],
    vehicle_position: PositionLike
) -> int:
    """Find the index of the path point closest to the vehicle.

    This is a point-localization primitive: it compares the vehicle position
    against the discrete path points only and does not project onto the
    segments between them. On tightly curved or sparse paths the nearest
    point may therefore differ from the nearest arc-length position.

    Args:
        points: Ordered path points or point/speed pairs
        vehicle_position: Vehicle position as PathPoint, VehicleState or (x, y)

    Returns:
        Index of the closest point; ties resolve to the smallest index

    Raises:
        ValueError: If ``points`` is empty
    """
    if len(points) == 0:
        raise ValueError("Cannot localize vehicle on an empty path")

    veh = as_path_point(vehicle_position)
    xy = points_to_array(points)
    distances = np.hypot(xy[:, 0] - veh.x, xy[:, 1] - veh.y)
    # argmin returns the first occurrence of the minimum
    return int(np.argmin(distances))


def normalize_angle(angle: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Normalize angle to (-pi, pi] range.

    Args:
        angle: Input angle in radians

    Returns:
        Normalized angle in (-pi, pi]
    """
    two_pi = 2.0 * np.pi
    a = angle - np.round(angle / two_pi) * two_pi

    if np.isscalar(a):
        if abs(a + np.pi) < 1e-9:
            return np.pi
        return float(a)

    a = np.asarray(a, dtype=float)
    a[np.abs(a + np.pi) < 1e-9] = np.pi
    return a
