"""Path planning module."""

from .cubic_spline import CubicSpline1D, CubicSpline2D
from .maneuver_points import (
    maneuvers_to_points,
    downsample_points,
    split_point_speed_pairs,
    point_speed_pairs_to_basic_points,
)
from .curve_fitting import (
    FittedCurve,
    XSplineCurve,
    ArcLengthSplineCurve,
    FitResult,
    fit_curve,
)
from .differential import (
    MAX_CURVATURE,
    calculate_yaw,
    calculate_curvature,
    yaw_sequence,
    curvature_sequence,
)
from .planner import InLaneCruisingPlanner
from ..core.geometry import nearest_point_index

__all__ = [
    'CubicSpline1D',
    'CubicSpline2D',
    'maneuvers_to_points',
    'downsample_points',
    'split_point_speed_pairs',
    'point_speed_pairs_to_basic_points',
    'nearest_point_index',
    'FittedCurve',
    'XSplineCurve',
    'ArcLengthSplineCurve',
    'FitResult',
    'fit_curve',
    'MAX_CURVATURE',
    'calculate_yaw',
    'calculate_curvature',
    'yaw_sequence',
    'curvature_sequence',
    'InLaneCruisingPlanner',
]
