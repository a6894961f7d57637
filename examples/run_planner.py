#!/usr/bin/env python3
"""Example script to plan an in-lane cruising path.

Builds an S-shaped demo route, runs one planning cycle over a two-maneuver
plan and optionally saves a plot of the result.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
from loguru import logger

from inlane_cruising.config import PlannerConfig, load_config
from inlane_cruising.core.data_structures import Maneuver, VehicleState
from inlane_cruising.planning.planner import InLaneCruisingPlanner
from inlane_cruising.world.lane_model import RouteLaneModel


def build_demo_route(length: float = 120.0, amplitude: float = 4.0, step: float = 0.5) -> RouteLaneModel:
    """S-shaped route along x."""
    x = np.arange(0.0, length + step / 2, step)
    y = amplitude * np.sin(2.0 * np.pi * x / length)
    return RouteLaneModel.from_centerline(np.column_stack([x, y]), lanelet_length=20.0)


def main():
    """Main function."""
    parser = argparse.ArgumentParser(
        description='Plan an in-lane cruising path over a demo route'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to planner configuration file'
    )
    parser.add_argument(
        '--vehicle-x',
        type=float,
        default=10.0,
        help='Vehicle x position [m]'
    )
    parser.add_argument(
        '--vehicle-y',
        type=float,
        default=0.0,
        help='Vehicle y position [m]'
    )
    parser.add_argument(
        '--plot',
        type=str,
        default=None,
        help='Save a plot of the planned path to this file'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level'
    )

    args = parser.parse_args()

    # Configure logging
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=args.log_level
    )

    if args.config is not None:
        logger.info(f"Loading planner configuration from {args.config}")
        config = load_config(args.config)
    else:
        config = PlannerConfig(downsample_ratio=4)

    route = build_demo_route()
    half = route.route_length / 2.0
    maneuvers = [
        Maneuver.lane_following(start_dist=0.0, end_dist=half, end_speed=8.0),
        Maneuver.lane_following(start_dist=half, end_dist=route.route_length, end_speed=12.0),
    ]

    planner = InLaneCruisingPlanner(route, config)
    outcome = planner.plan(maneuvers, VehicleState(x=args.vehicle_x, y=args.vehicle_y))

    logger.info("=" * 60)
    logger.info("PLANNING SUMMARY")
    logger.info("=" * 60)
    logger.info(f"Status: {outcome.status.name}")

    if not outcome.ok:
        if outcome.error:
            logger.error(f"Planning failed: {outcome.error}")
        for d in outcome.diagnostics:
            logger.warning(f"[{d.code}] {d.message}")
        return 1

    path = outcome.path
    logger.info(f"Nearest point index: {path.nearest_index}")
    logger.info(f"Path points: {len(path.points)}, samples: {len(path)}")
    logger.info(f"Yaw range: [{min(path.yaw):.3f}, {max(path.yaw):.3f}] rad")
    logger.info(f"Max curvature: {max(path.curvature):.4f} 1/m")
    logger.info(f"Target speeds: {sorted(set(path.speeds))}")

    if args.plot is not None:
        from inlane_cruising.visualization import plot_planned_path

        route_points = route.concatenate_geometry(route.lanelets)
        plot_planned_path(path, args.plot, route_points=route_points)

    logger.success("Planning complete!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
