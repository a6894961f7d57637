"""Core data structures for the in-lane cruising path core.

This module defines the data structures shared by every stage of the
maneuver-to-path pipeline, keeping the interfaces between stages explicit.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple, Union
import numpy as np


class ManeuverType(Enum):
    """Maneuver discriminants of a maneuver plan."""
    LANE_FOLLOWING = auto()
    LANE_CHANGE = auto()
    INTERSECTION_TRANSIT_STRAIGHT = auto()
    INTERSECTION_TRANSIT_LEFT_TURN = auto()
    INTERSECTION_TRANSIT_RIGHT_TURN = auto()
    STOP_AND_WAIT = auto()


@dataclass(frozen=True)
class PathPoint:
    """2D position in a fixed inertial frame.

    Attributes:
        x: X coordinate [m]
        y: Y coordinate [m]
    """
    x: float
    y: float

    def to_array(self) -> np.ndarray:
        """Convert to numpy array [x, y]."""
        return np.array([self.x, self.y])

    @classmethod
    def from_array(cls, arr: Sequence[float]) -> 'PathPoint':
        """Create from any indexable [x, y]."""
        return cls(x=float(arr[0]), y=float(arr[1]))


@dataclass(frozen=True)
class PointSpeedPair:
    """Path position paired with its target speed.

    Attributes:
        point: Position on the path
        speed: Target speed at this position [m/s]
    """
    point: PathPoint
    speed: float


@dataclass(frozen=True)
class LaneFollowingManeuver:
    """Lane-following segment of a maneuver plan.

    Attributes:
        start_dist: Downtrack distance where the maneuver starts [m]
        end_dist: Downtrack distance where the maneuver ends [m]
        start_speed: Speed at the start of the maneuver [m/s]
        end_speed: Target speed at the end of the maneuver [m/s]
        lane_id: Identifier of the lane being followed
        start_time: Planned start time [s]
        end_time: Planned end time [s]
    """
    start_dist: float
    end_dist: float
    end_speed: float
    start_speed: float = 0.0
    lane_id: Optional[str] = None
    start_time: float = 0.0
    end_time: float = 0.0


@dataclass(frozen=True)
class Maneuver:
    """One entry of a maneuver plan.

    Only ``lane_following_maneuver`` is modelled; other maneuver kinds carry
    their discriminant alone since they are rejected by this core.
    """
    type: ManeuverType
    lane_following_maneuver: Optional[LaneFollowingManeuver] = None

    @classmethod
    def lane_following(
        cls,
        start_dist: float,
        end_dist: float,
        end_speed: float,
        **kwargs
    ) -> 'Maneuver':
        """Build a lane-following maneuver."""
        return cls(
            type=ManeuverType.LANE_FOLLOWING,
            lane_following_maneuver=LaneFollowingManeuver(
                start_dist=start_dist,
                end_dist=end_dist,
                end_speed=end_speed,
                **kwargs
            ),
        )


@dataclass
class VehicleState:
    """Current vehicle state estimate.

    Attributes:
        x: X position of the center of gravity in the inertial frame [m]
        y: Y position of the center of gravity in the inertial frame [m]
        yaw: Orientation of the longitudinal axis [rad]
        longitudinal_vel: Longitudinal velocity in the body frame [m/s]
    """
    x: float
    y: float
    yaw: float = 0.0
    longitudinal_vel: float = 0.0

    @property
    def position(self) -> PathPoint:
        return PathPoint(self.x, self.y)


class DiagnosticLevel(Enum):
    """Severity of a diagnostic event."""
    DEBUG = 'DEBUG'
    INFO = 'INFO'
    WARNING = 'WARNING'
    ERROR = 'ERROR'


@dataclass(frozen=True)
class Diagnostic:
    """Diagnostic event returned alongside a computation result.

    Attributes:
        level: Severity of the event
        code: Short machine-readable identifier (e.g. 'insufficient_points')
        message: Human-readable description
    """
    level: DiagnosticLevel
    code: str
    message: str


class PlanningStatus(Enum):
    """Outcome kind of one planning cycle."""
    SUCCESS = auto()
    INSUFFICIENT_DATA = auto()
    CONTRACT_VIOLATION = auto()


@dataclass
class PlannedPath:
    """Speed-annotated smooth path produced by one planning cycle.

    Attributes:
        points: Downsampled path points ahead of the vehicle
        speeds: Target speed per entry of ``points``
        sampling_points: Points where yaw and curvature were estimated
        yaw: Heading per sampling point [rad]
        curvature: Curvature magnitude per sampling point [1/m]
        nearest_index: Index of the point nearest to the vehicle in the
            downsampled path before trimming
        curve: Fitted curve the sampling points were taken from
    """
    points: List[PathPoint] = field(default_factory=list)
    speeds: List[float] = field(default_factory=list)
    sampling_points: List[PathPoint] = field(default_factory=list)
    yaw: List[float] = field(default_factory=list)
    curvature: List[float] = field(default_factory=list)
    nearest_index: int = 0
    curve: Optional[object] = None

    def __len__(self) -> int:
        return len(self.sampling_points)


@dataclass
class PlanningOutcome:
    """Result of one planning cycle, success or not.

    Attributes:
        status: Outcome kind
        path: Planned path, only set on success
        diagnostics: Events gathered while planning
        error: Description of the contract violation, if any
    """
    status: PlanningStatus
    path: Optional[PlannedPath] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == PlanningStatus.SUCCESS


PositionLike = Union[PathPoint, VehicleState, Tuple[float, float], np.ndarray]


def as_path_point(position: PositionLike) -> PathPoint:
    """Coerce a position-like value to a PathPoint."""
    if isinstance(position, PathPoint):
        return position
    if isinstance(position, VehicleState):
        return position.position
    return PathPoint.from_array(position)
