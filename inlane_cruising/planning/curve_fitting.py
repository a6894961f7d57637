"""Smooth curve fitting through ordered path points.

The fitter never logs; insufficient or unusable input is reported through
the diagnostics of the returned ``FitResult`` and the caller decides what to
do with them.
"""

import math
import numpy as np
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from ..core.data_structures import Diagnostic, DiagnosticLevel, PathPoint, PointSpeedPair
from ..core.geometry import points_to_array
from .cubic_spline import CubicSpline1D, CubicSpline2D

MIN_FIT_POINTS = 3
PARAMETERIZATIONS = ('x', 'arc_length')


class FittedCurve(ABC):
    """Smooth interpolant through an ordered list of distinct points.

    Subclasses define the curve parameter ``t``. ``parameters`` holds the
    parameter value of every control point, so ``calc_position(parameters[i])``
    returns ``points[i]``.
    """

    parameterization = None

    def __init__(self, points: Sequence[PathPoint], parameters: Sequence[float]):
        self.points = tuple(points)
        self.parameters = tuple(float(t) for t in parameters)

    @abstractmethod
    def calc_position(self, t):
        """Position (x, y) at parameter t."""

    @abstractmethod
    def calc_yaw(self, t):
        """Heading at parameter t [rad]."""

    @abstractmethod
    def calc_curvature(self, t):
        """Signed curvature at parameter t [1/m]."""

    def sample(self, spacing: float) -> List[PathPoint]:
        """Sample the curve at a fixed parameter spacing.

        The first and last control points are always included.

        Args:
            spacing: Parameter step, in x units or meters of arc length
        """
        if spacing <= 0:
            raise ValueError(f"spacing must be positive, got {spacing}")

        t_start, t_end = self.parameters[0], self.parameters[-1]
        ts = np.arange(t_start, t_end, spacing)
        ts = np.append(ts[t_end - ts > 1e-6 * spacing], t_end)
        xs, ys = self.calc_position(ts)
        return [PathPoint(float(x), float(y)) for x, y in zip(xs, ys)]

    def __len__(self) -> int:
        return len(self.points)


class XSplineCurve(FittedCurve):
    """Cubic spline y(x) parameterized by raw x.

    Only valid for routes that are strictly increasing in x.
    """

    parameterization = 'x'

    def __init__(self, points: Sequence[PathPoint]):
        xy = points_to_array(points)
        super().__init__(points, xy[:, 0])
        self.spline = CubicSpline1D(xy[:, 0], xy[:, 1])

    def calc_position(self, t):
        return t, self.spline.calc_position(t)

    def calc_yaw(self, t):
        dy = self.spline.calc_first_derivative(t)
        if dy is None:
            return None
        if np.isscalar(dy):
            return math.atan2(dy, 1.0)
        return np.arctan2(dy, 1.0)

    def calc_curvature(self, t):
        dy = self.spline.calc_first_derivative(t)
        ddy = self.spline.calc_second_derivative(t)
        if dy is None or ddy is None:
            return None
        return ddy / (1.0 + dy ** 2) ** 1.5


class ArcLengthSplineCurve(FittedCurve):
    """Pair of cubic splines x(s), y(s) over cumulative chord length."""

    parameterization = 'arc_length'

    def __init__(self, points: Sequence[PathPoint]):
        xy = points_to_array(points)
        self.spline = CubicSpline2D(xy[:, 0], xy[:, 1])
        super().__init__(points, self.spline.s)

    def calc_position(self, t):
        return self.spline.calc_position(t)

    def calc_yaw(self, t):
        return self.spline.calc_yaw(t)

    def calc_curvature(self, t):
        return self.spline.calc_curvature(t)


@dataclass
class FitResult:
    """Outcome of a curve fit.

    Attributes:
        curve: Fitted curve, None when no fit could be made
        diagnostics: Events describing how the input was handled
    """
    curve: Optional[FittedCurve] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.curve is not None


def _remove_consecutive_duplicates(points: List[PathPoint]) -> Tuple[List[PathPoint], int]:
    unique = points[:1]
    for p in points[1:]:
        if p != unique[-1]:
            unique.append(p)
    return unique, len(points) - len(unique)


def fit_curve(
    points: Sequence[Union[PathPoint, PointSpeedPair]],
    parameterization: str = 'x'
) -> FitResult:
    """Fit a smooth interpolating curve through ordered points.

    The curve passes exactly through every point. With the ``'x'``
    parameterization the points must be strictly increasing in x; routes
    that turn back on themselves (hairpins) need ``'arc_length'``.

    Args:
        points: Ordered path points or point/speed pairs
        parameterization: ``'x'`` or ``'arc_length'``

    Returns:
        FitResult holding the curve, or no curve plus a diagnostic when
        fewer than 3 distinct points are given or x is not monotonic

    Raises:
        ValueError: If ``parameterization`` is unknown
    """
    if parameterization not in PARAMETERIZATIONS:
        raise ValueError(
            f"parameterization must be one of {list(PARAMETERIZATIONS)}, got '{parameterization}'"
        )

    basic_points = [p.point if isinstance(p, PointSpeedPair) else p for p in points]
    diagnostics: List[Diagnostic] = []

    if len(basic_points) < MIN_FIT_POINTS:
        diagnostics.append(Diagnostic(
            DiagnosticLevel.WARNING,
            'insufficient_points',
            f"Insufficient spline points: {len(basic_points)} given, {MIN_FIT_POINTS} required",
        ))
        return FitResult(None, diagnostics)

    basic_points, n_removed = _remove_consecutive_duplicates(basic_points)
    if n_removed:
        diagnostics.append(Diagnostic(
            DiagnosticLevel.INFO,
            'duplicates_removed',
            f"Removed {n_removed} consecutive duplicate points before fitting",
        ))
        if len(basic_points) < MIN_FIT_POINTS:
            diagnostics.append(Diagnostic(
                DiagnosticLevel.WARNING,
                'insufficient_points',
                f"Insufficient distinct spline points: {len(basic_points)} left, "
                f"{MIN_FIT_POINTS} required",
            ))
            return FitResult(None, diagnostics)

    if parameterization == 'x':
        xs = np.array([p.x for p in basic_points])
        if np.any(np.diff(xs) <= 0):
            diagnostics.append(Diagnostic(
                DiagnosticLevel.ERROR,
                'non_monotonic_x',
                "Points are not strictly increasing in x; use arc_length parameterization",
            ))
            return FitResult(None, diagnostics)
        return FitResult(XSplineCurve(basic_points), diagnostics)

    return FitResult(ArcLengthSplineCurve(basic_points), diagnostics)
