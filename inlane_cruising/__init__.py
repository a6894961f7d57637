"""In-lane cruising path core.

Turns lane-following maneuver plans into smooth, speed-annotated paths with
yaw and curvature estimates for a trajectory controller.
"""

from .core import (
    PathPoint,
    PointSpeedPair,
    Maneuver,
    ManeuverType,
    LaneFollowingManeuver,
    VehicleState,
    PlanningStatus,
    InvalidManeuverType,
    nearest_point_index,
)
from .planning import (
    maneuvers_to_points,
    downsample_points,
    fit_curve,
    yaw_sequence,
    curvature_sequence,
    InLaneCruisingPlanner,
)
from .world import RouteLaneModel
from .config import PlannerConfig, load_config

__version__ = '0.1.0'

__all__ = [
    'PathPoint',
    'PointSpeedPair',
    'Maneuver',
    'ManeuverType',
    'LaneFollowingManeuver',
    'VehicleState',
    'PlanningStatus',
    'InvalidManeuverType',
    'nearest_point_index',
    'maneuvers_to_points',
    'downsample_points',
    'fit_curve',
    'yaw_sequence',
    'curvature_sequence',
    'InLaneCruisingPlanner',
    'RouteLaneModel',
    'PlannerConfig',
    'load_config',
]
