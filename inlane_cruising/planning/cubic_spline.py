"""Natural cubic splines used to smooth lane geometry.

Based on the implementation from PythonRobotics:
https://github.com/AtsushiSakai/PythonRobotics
"""

import bisect
import math
import numpy as np
from typing import List, Sequence, Tuple, Union

Scalar = Union[float, np.ndarray]


class CubicSpline1D:
    """1D Cubic Spline interpolation.

    Interpolates y(x) piecewise with cubic polynomials and natural boundary
    conditions. The spline passes exactly through every knot and is C2
    continuous between them.

    Args:
        x: Knot parameters, strictly increasing
        y: Knot values
    """

    def __init__(self, x: Sequence[float], y: Sequence[float]):
        if len(x) != len(y):
            raise ValueError(f"x ({len(x)}) and y ({len(y)}) must have the same length")
        if len(x) < 2:
            raise ValueError("At least 2 knots are required")

        h = np.diff(x)
        if np.any(h <= 0):
            raise ValueError("x coordinates must be strictly increasing")

        self.x = [float(v) for v in x]
        self.nx = len(self.x)
        self.a = np.asarray(y, dtype=float)

        # Second order coefficients from the tridiagonal system
        A = self._calc_A(h)
        B = self._calc_B(h, self.a)
        self.c = np.linalg.solve(A, B)

        self.d = (self.c[1:] - self.c[:-1]) / (3.0 * h)
        self.b = (self.a[1:] - self.a[:-1]) / h \
            - h / 3.0 * (2.0 * self.c[:-1] + self.c[1:])

    def calc_position(self, x: Scalar) -> Union[float, np.ndarray, None]:
        """Calculate y for given x.

        Returns None for a scalar outside the knot range, NaN entries for
        array elements outside it.
        """
        return self._evaluate(x, 0)

    def calc_first_derivative(self, x: Scalar) -> Union[float, np.ndarray, None]:
        """Calculate dy/dx for given x."""
        return self._evaluate(x, 1)

    def calc_second_derivative(self, x: Scalar) -> Union[float, np.ndarray, None]:
        """Calculate d2y/dx2 for given x."""
        return self._evaluate(x, 2)

    def _evaluate(self, x: Scalar, order: int) -> Union[float, np.ndarray, None]:
        if np.isscalar(x):
            if x < self.x[0] or x > self.x[-1]:
                return None
            i = self._search_index(x)
            return float(self._polynomial(i, x - self.x[i], order))

        x = np.asarray(x, dtype=float)
        mask = (x >= self.x[0]) & (x <= self.x[-1])
        res = np.full_like(x, np.nan, dtype=float)
        if np.any(mask):
            i = self._search_index(x[mask])
            dx = x[mask] - np.asarray(self.x)[i]
            res[mask] = self._polynomial(i, dx, order)
        return res

    def _polynomial(self, i, dx, order: int):
        a, b, c, d = self.a[i], self.b[i], self.c[i], self.d[i]
        if order == 0:
            return a + b * dx + c * dx ** 2 + d * dx ** 3
        if order == 1:
            return b + 2.0 * c * dx + 3.0 * d * dx ** 2
        if order == 2:
            return 2.0 * c + 6.0 * d * dx
        raise ValueError(f"Unsupported derivative order {order}")

    def _search_index(self, x: Scalar) -> Union[int, np.ndarray]:
        """Search data segment index for given x."""
        if np.isscalar(x):
            idx = bisect.bisect(self.x, x) - 1
            return min(max(idx, 0), self.nx - 2)

        idx = np.searchsorted(self.x, x, side='right') - 1
        return np.clip(idx, 0, self.nx - 2)

    def _calc_A(self, h: np.ndarray) -> np.ndarray:
        """Calculate matrix A for spline coefficient c."""
        A = np.zeros((self.nx, self.nx))
        A[0, 0] = 1.0
        for i in range(self.nx - 1):
            if i != (self.nx - 2):
                A[i + 1, i + 1] = 2.0 * (h[i] + h[i + 1])
            A[i + 1, i] = h[i]
            A[i, i + 1] = h[i]

        A[0, 1] = 0.0
        A[self.nx - 1, self.nx - 2] = 0.0
        A[self.nx - 1, self.nx - 1] = 1.0
        return A

    def _calc_B(self, h: np.ndarray, a: np.ndarray) -> np.ndarray:
        """Calculate matrix B for spline coefficient c."""
        B = np.zeros(self.nx)
        for i in range(self.nx - 2):
            B[i + 1] = 3.0 * (a[i + 2] - a[i + 1]) / h[i + 1] \
                - 3.0 * (a[i + 1] - a[i]) / h[i]
        return B


class CubicSpline2D:
    """2D Cubic Spline path parameterized by arc length.

    Fits x(s) and y(s) separately over the cumulative chord length s of the
    waypoints, so the path may turn back on itself in x or y.

    Args:
        x: x coordinates of waypoints
        y: y coordinates of waypoints
    """

    def __init__(self, x: Sequence[float], y: Sequence[float]):
        self.s = self._calc_s(x, y)
        self.sx = CubicSpline1D(self.s, x)
        self.sy = CubicSpline1D(self.s, y)

    def _calc_s(self, x: Sequence[float], y: Sequence[float]) -> List[float]:
        """Calculate cumulative arc length along the path."""
        self.ds = np.hypot(np.diff(x), np.diff(y))
        s = [0.0]
        s.extend(np.cumsum(self.ds).tolist())
        return s

    def calc_position(self, s: Scalar) -> Tuple[Union[float, np.ndarray, None], Union[float, np.ndarray, None]]:
        """Calculate (x, y) at given arc length."""
        return self.sx.calc_position(s), self.sy.calc_position(s)

    def calc_yaw(self, s: Scalar) -> Union[float, np.ndarray, None]:
        """Calculate heading angle [rad] at given arc length."""
        dx = self.sx.calc_first_derivative(s)
        dy = self.sy.calc_first_derivative(s)

        if np.isscalar(s):
            if dx is None or dy is None:
                return None
            return math.atan2(dy, dx)

        return np.arctan2(dy, dx)

    def calc_curvature(self, s: Scalar) -> Union[float, np.ndarray, None]:
        """Calculate signed curvature [1/m] at given arc length."""
        dx = self.sx.calc_first_derivative(s)
        ddx = self.sx.calc_second_derivative(s)
        dy = self.sy.calc_first_derivative(s)
        ddy = self.sy.calc_second_derivative(s)

        if np.isscalar(s):
            if dx is None or ddx is None or dy is None or ddy is None:
                return None
            return (ddy * dx - ddx * dy) / ((dx ** 2 + dy ** 2) ** 1.5)

        with np.errstate(invalid='ignore', divide='ignore'):
            return (ddy * dx - ddx * dy) / ((dx ** 2 + dy ** 2) ** 1.5)
