"""Core module for fundamental data structures and utilities."""

from .data_structures import (
    ManeuverType,
    PathPoint,
    PointSpeedPair,
    LaneFollowingManeuver,
    Maneuver,
    VehicleState,
    DiagnosticLevel,
    Diagnostic,
    PlanningStatus,
    PlannedPath,
    PlanningOutcome,
    as_path_point,
)
from .errors import InlaneCruisingError, InvalidManeuverType
from .geometry import (
    distance2d,
    points_to_array,
    cumulative_distance,
    nearest_point_index,
    normalize_angle,
)

__all__ = [
    'ManeuverType',
    'PathPoint',
    'PointSpeedPair',
    'LaneFollowingManeuver',
    'Maneuver',
    'VehicleState',
    'DiagnosticLevel',
    'Diagnostic',
    'PlanningStatus',
    'PlannedPath',
    'PlanningOutcome',
    'as_path_point',
    'InlaneCruisingError',
    'InvalidManeuverType',
    'distance2d',
    'points_to_array',
    'cumulative_distance',
    'nearest_point_index',
    'normalize_angle',
]
