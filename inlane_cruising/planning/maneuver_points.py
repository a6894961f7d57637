"""Conversion of maneuver plans into speed-annotated path points."""

import numbers
from typing import List, Sequence, Tuple

from ..core.data_structures import Maneuver, ManeuverType, PathPoint, PointSpeedPair
from ..core.errors import InvalidManeuverType
from ..world.lane_model import LaneModel


def maneuvers_to_points(
    maneuvers: Sequence[Maneuver],
    lane_model: LaneModel
) -> List[PointSpeedPair]:
    """Extract the route geometry covered by a maneuver plan.

    Every centerline point of a maneuver is paired with that maneuver's end
    speed, giving a flat speed step per maneuver. Points shared by adjacent
    maneuvers are not deduplicated.

    Args:
        maneuvers: Ordered maneuver plan
        lane_model: Lane geometry provider

    Returns:
        Ordered point/speed pairs for the whole plan

    Raises:
        InvalidManeuverType: If any maneuver is not lane following. Nothing
            is returned in that case, even for the maneuvers before it.
    """
    for i, maneuver in enumerate(maneuvers):
        if maneuver.type != ManeuverType.LANE_FOLLOWING or maneuver.lane_following_maneuver is None:
            raise InvalidManeuverType(maneuver.type, i)

    points_and_target_speeds: List[PointSpeedPair] = []
    for maneuver in maneuvers:
        lane_following = maneuver.lane_following_maneuver
        lanelets = lane_model.lanelets_between(lane_following.start_dist, lane_following.end_dist)
        route_geometry = lane_model.concatenate_geometry(lanelets)

        points_and_target_speeds.extend(
            PointSpeedPair(point=p, speed=lane_following.end_speed) for p in route_geometry
        )

    return points_and_target_speeds


def downsample_points(points: Sequence[PointSpeedPair], nth_point: int) -> List[PointSpeedPair]:
    """Keep every nth point, starting with the first one.

    No interpolation is done, so a large stride can skip over tight bends.

    Raises:
        ValueError: If ``nth_point`` is not a positive integer
    """
    if isinstance(nth_point, bool) or not isinstance(nth_point, numbers.Integral) or nth_point <= 0:
        raise ValueError(f"nth_point must be a positive integer, got {nth_point!r}")
    return list(points[::nth_point])


def split_point_speed_pairs(points: Sequence[PointSpeedPair]) -> Tuple[List[PathPoint], List[float]]:
    """Split point/speed pairs into parallel point and speed lists."""
    return [p.point for p in points], [p.speed for p in points]


def point_speed_pairs_to_basic_points(points: Sequence[PointSpeedPair]) -> List[PathPoint]:
    return [p.point for p in points]
