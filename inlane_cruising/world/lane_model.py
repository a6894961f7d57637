"""Lane model interface and an in-memory route implementation.

The planning core only needs two queries from the world model: the lanelets
spanning a downtrack interval of the route, and the concatenated centerline
of a lanelet sequence. ``LaneModel`` captures that narrow interface;
``RouteLaneModel`` implements it over an ordered list of lanelet centerlines.
"""

import numpy as np
from dataclasses import dataclass
from typing import List, Protocol, Sequence, Union
from loguru import logger

from ..core.data_structures import PathPoint
from ..core.geometry import cumulative_distance, points_to_array


@dataclass
class Lanelet:
    """Lanelet of the route, described by its centerline.

    Attributes:
        id: Lanelet identifier
        centerline: Ordered centerline points, shape (n, 2) with n >= 2
    """
    id: str
    centerline: np.ndarray

    def __post_init__(self):
        """Validate centerline shape."""
        self.centerline = np.asarray(self.centerline, dtype=float)
        if self.centerline.ndim != 2 or self.centerline.shape[1] != 2:
            raise ValueError(
                f"Lanelet {self.id} centerline must have shape (n, 2), got {self.centerline.shape}"
            )
        if self.centerline.shape[0] < 2:
            raise ValueError(f"Lanelet {self.id} centerline needs at least 2 points")

    @property
    def length(self) -> float:
        """Centerline length [m]."""
        return float(cumulative_distance(self.centerline)[-1])


class LaneModel(Protocol):
    """Geometry queries the path core consumes from the world model."""

    def lanelets_between(self, start_dist: float, end_dist: float) -> List[Lanelet]:
        """Ordered lanelets of the route overlapping [start_dist, end_dist]."""
        ...

    def concatenate_geometry(self, lanelets: Sequence[Lanelet]) -> List[PathPoint]:
        """Concatenated centerline of the given lanelets as ordered points."""
        ...


class RouteLaneModel:
    """Lane model over a single route made of consecutive lanelets.

    Downtrack distance is measured along the concatenated centerlines,
    starting at 0 at the first point of the first lanelet.

    Args:
        lanelets: Ordered lanelets along the route
    """

    def __init__(self, lanelets: Sequence[Lanelet]):
        if len(lanelets) == 0:
            raise ValueError("RouteLaneModel requires at least one lanelet")
        self.lanelets = list(lanelets)

        lengths = np.array([ll.length for ll in self.lanelets])
        self._end_dists = np.cumsum(lengths)
        self._start_dists = self._end_dists - lengths

        logger.info(
            f"Route lane model initialized with {len(self.lanelets)} lanelets, "
            f"length {self.route_length:.2f}m"
        )

    @classmethod
    def from_centerline(
        cls,
        points: Union[Sequence[PathPoint], np.ndarray],
        lanelet_length: float = 25.0
    ) -> 'RouteLaneModel':
        """Split a single route centerline into lanelets.

        Consecutive lanelets share their boundary point, like lanelets of a
        real map do.

        Args:
            points: Route centerline, PathPoints or an (n, 2) array
            lanelet_length: Approximate length of each lanelet [m]
        """
        if lanelet_length <= 0:
            raise ValueError(f"lanelet_length must be positive, got {lanelet_length}")

        xy = np.asarray(points, dtype=float) if isinstance(points, np.ndarray) \
            else points_to_array(points)
        if len(xy) < 2:
            raise ValueError("Route centerline needs at least 2 points")

        s = cumulative_distance(xy)
        lanelets = []
        start = 0
        for i in range(1, len(xy)):
            if s[i] - s[start] >= lanelet_length or i == len(xy) - 1:
                lanelets.append(Lanelet(id=str(len(lanelets)), centerline=xy[start:i + 1]))
                start = i

        return cls(lanelets)

    @property
    def route_length(self) -> float:
        """Total route length [m]."""
        return float(self._end_dists[-1])

    def lanelets_between(self, start_dist: float, end_dist: float) -> List[Lanelet]:
        """Get the lanelets overlapping a downtrack interval.

        Both interval endpoints are inclusive, so a lanelet that only touches
        the interval at a boundary is returned as well.

        Args:
            start_dist: Start downtrack distance [m]
            end_dist: End downtrack distance [m]

        Returns:
            Lanelets in route order
        """
        if end_dist < start_dist:
            raise ValueError(
                f"end_dist ({end_dist}) must be >= start_dist ({start_dist})"
            )
        mask = (self._start_dists <= end_dist) & (self._end_dists >= start_dist)
        return [ll for ll, keep in zip(self.lanelets, mask) if keep]

    def concatenate_geometry(self, lanelets: Sequence[Lanelet]) -> List[PathPoint]:
        """Concatenate lanelet centerlines into one ordered point list.

        When a lanelet starts where the previous one ended, the shared point
        is emitted once.
        """
        points: List[PathPoint] = []
        for ll in lanelets:
            centerline = ll.centerline
            if points and np.allclose(centerline[0], points[-1].to_array()):
                centerline = centerline[1:]
            points.extend(PathPoint(float(x), float(y)) for x, y in centerline)
        return points
