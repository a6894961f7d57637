"""Yaw and curvature estimation along sampled paths.

Both estimates are forward differences between consecutive sampling points.
The last point has no successor, so its value repeats the one before it and
the output stays index-aligned with the sampling points.
"""

import math
import numpy as np
from typing import List, Optional, Sequence, Union

from ..core.data_structures import PathPoint, PointSpeedPair
from ..core.geometry import normalize_angle, points_to_array
from .curve_fitting import FittedCurve

MAX_CURVATURE = 100000.0  # Clamp for near-zero turning radius [1/m]

SamplingPoints = Sequence[Union[PathPoint, PointSpeedPair]]


def calculate_yaw(cur_point: PathPoint, next_point: PathPoint) -> float:
    """Heading from one point to the next [rad], in (-pi, pi]."""
    return normalize_angle(math.atan2(next_point.y - cur_point.y, next_point.x - cur_point.x))


def calculate_curvature(
    cur_point: PathPoint,
    next_point: PathPoint,
    max_curvature: float = MAX_CURVATURE
) -> float:
    """Curvature magnitude from the circumscribed radius of a chord.

    The radius is r = 0.5 * d / sin(yaw), with d the chord length and yaw
    the chord heading. A zero sine or zero chord means an infinite radius,
    so the curvature is 0 there rather than NaN.

    Returns:
        Curvature in [0, max_curvature]
    """
    dist = math.hypot(next_point.x - cur_point.x, next_point.y - cur_point.y)
    sin_yaw = math.sin(calculate_yaw(cur_point, next_point))
    if dist == 0.0 or sin_yaw == 0.0:
        return 0.0

    # 1 / r = 2 * sin(yaw) / d, compared against the clamp before dividing
    numerator = abs(2.0 * sin_yaw)
    if numerator >= max_curvature * dist:
        return max_curvature
    return numerator / dist


def _resolve_sampling_points(
    curve: Optional[FittedCurve],
    sampling_points: Optional[SamplingPoints]
) -> np.ndarray:
    if sampling_points is None:
        if curve is None:
            raise ValueError("Either a curve or sampling points are required")
        sampling_points = curve.points

    xy = points_to_array(sampling_points)
    if len(xy) < 2:
        raise ValueError(
            f"At least 2 sampling points are required, got {len(xy)}"
        )
    return xy


def _pad_last(values: np.ndarray) -> List[float]:
    return np.append(values, values[-1]).tolist()


def yaw_sequence(
    curve: Optional[FittedCurve],
    sampling_points: Optional[SamplingPoints] = None
) -> List[float]:
    """Heading at every sampling point.

    Args:
        curve: Fitted curve; its control points are used when no sampling
            points are given
        sampling_points: Ordered points to estimate the heading at

    Returns:
        One yaw per sampling point [rad]

    Raises:
        ValueError: If fewer than 2 sampling points are available
    """
    xy = _resolve_sampling_points(curve, sampling_points)
    yaw = normalize_angle(np.arctan2(np.diff(xy[:, 1]), np.diff(xy[:, 0])))
    return _pad_last(yaw)


def curvature_sequence(
    curve: Optional[FittedCurve],
    sampling_points: Optional[SamplingPoints] = None,
    max_curvature: float = MAX_CURVATURE
) -> List[float]:
    """Curvature magnitude at every sampling point.

    Vectorized form of ``calculate_curvature`` over consecutive pairs.
    The sign (turn direction) is dropped; derive it from the yaw change when
    needed.

    Returns:
        One curvature per sampling point, each in [0, max_curvature]

    Raises:
        ValueError: If fewer than 2 sampling points are available
    """
    xy = _resolve_sampling_points(curve, sampling_points)
    dx = np.diff(xy[:, 0])
    dy = np.diff(xy[:, 1])
    dist = np.hypot(dx, dy)
    sin_yaw = np.sin(np.arctan2(dy, dx))

    # 1 / r = 2 * sin(yaw) / d, zero where the radius is infinite
    curvature = np.zeros_like(dist)
    valid = (dist > 0.0) & (sin_yaw != 0.0)
    with np.errstate(over='ignore', divide='ignore'):
        curvature[valid] = np.abs(2.0 * sin_yaw[valid] / dist[valid])
    curvature = np.minimum(curvature, max_curvature)
    return _pad_last(curvature)
