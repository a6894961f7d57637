"""In-lane cruising path planner.

Runs one planning cycle of the path core: maneuver plan to route points,
downsampling, vehicle localization, spline fitting and yaw/curvature
estimation. Every cycle starts from scratch; the planner keeps no state
between calls other than its configuration and lane model.
"""

from typing import List, Optional, Sequence
from loguru import logger

from ..config import PlannerConfig, validate_config
from ..core.data_structures import (
    Diagnostic,
    DiagnosticLevel,
    Maneuver,
    PlannedPath,
    PlanningOutcome,
    PlanningStatus,
    PositionLike,
)
from ..core.errors import InvalidManeuverType
from ..core.geometry import nearest_point_index
from ..world.lane_model import LaneModel
from .curve_fitting import fit_curve
from .differential import curvature_sequence, yaw_sequence
from .maneuver_points import downsample_points, maneuvers_to_points, split_point_speed_pairs


class InLaneCruisingPlanner:
    """Speed-annotated smooth path generation for lane-following plans.

    Caller contract violations raised by the core (unsupported maneuvers,
    bad arguments) are turned into ``CONTRACT_VIOLATION`` outcomes, and
    geometry too sparse to smooth into ``INSUFFICIENT_DATA`` outcomes, so a
    planning cycle never raises.

    Args:
        lane_model: Lane geometry provider
        config: Planner configuration, defaults when omitted
    """

    def __init__(self, lane_model: LaneModel, config: Optional[PlannerConfig] = None):
        self.lane_model = lane_model
        self.config = config if config is not None else PlannerConfig()
        validate_config(self.config)

        logger.info(
            f"In-lane cruising planner initialized with downsample_ratio={self.config.downsample_ratio}, "
            f"parameterization={self.config.curve_parameterization}"
        )

    def plan(
        self,
        maneuvers: Sequence[Maneuver],
        vehicle_position: PositionLike
    ) -> PlanningOutcome:
        """Plan a smooth path for the given maneuver plan.

        Args:
            maneuvers: Ordered maneuver plan
            vehicle_position: Current vehicle position or VehicleState

        Returns:
            Outcome carrying the planned path on success
        """
        diagnostics: List[Diagnostic] = []

        try:
            points = maneuvers_to_points(maneuvers, self.lane_model)
            if not points:
                diagnostics.append(Diagnostic(
                    DiagnosticLevel.WARNING, 'empty_path', "Maneuver plan produced no route points"
                ))
                self._log_diagnostics(diagnostics)
                return PlanningOutcome(PlanningStatus.INSUFFICIENT_DATA, diagnostics=diagnostics)

            downsampled = downsample_points(points, self.config.downsample_ratio)
            nearest_index = nearest_point_index(downsampled, vehicle_position)
        except (InvalidManeuverType, ValueError) as e:
            logger.error(f"Planning aborted: {e}")
            return PlanningOutcome(PlanningStatus.CONTRACT_VIOLATION, diagnostics=diagnostics, error=str(e))

        logger.debug(
            f"Extracted {len(points)} points, {len(downsampled)} after downsampling, "
            f"nearest index {nearest_index}"
        )

        ahead = downsampled[nearest_index:] if self.config.trim_behind_vehicle else downsampled

        fit = fit_curve(ahead, self.config.curve_parameterization)
        diagnostics.extend(fit.diagnostics)
        self._log_diagnostics(fit.diagnostics)
        if not fit.ok:
            return PlanningOutcome(PlanningStatus.INSUFFICIENT_DATA, diagnostics=diagnostics)

        curve = fit.curve
        if self.config.curve_sample_spacing > 0:
            sampling_points = curve.sample(self.config.curve_sample_spacing)
        else:
            sampling_points = list(curve.points)

        path_points, speeds = split_point_speed_pairs(ahead)
        path = PlannedPath(
            points=path_points,
            speeds=speeds,
            sampling_points=sampling_points,
            yaw=yaw_sequence(curve, sampling_points),
            curvature=curvature_sequence(curve, sampling_points, self.config.max_curvature),
            nearest_index=nearest_index,
            curve=curve,
        )

        logger.debug(f"Planned path with {len(path)} samples")
        return PlanningOutcome(PlanningStatus.SUCCESS, path=path, diagnostics=diagnostics)

    @staticmethod
    def _log_diagnostics(diagnostics: Sequence[Diagnostic]) -> None:
        for d in diagnostics:
            logger.log(d.level.value, f"[{d.code}] {d.message}")
