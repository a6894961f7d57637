"""Tests for planned path visualization."""

import pytest
import numpy as np

from inlane_cruising.config import PlannerConfig
from inlane_cruising.core.data_structures import Maneuver, PathPoint, PlannedPath
from inlane_cruising.planning.planner import InLaneCruisingPlanner
from inlane_cruising.world.lane_model import RouteLaneModel


@pytest.fixture
def planned_path():
    theta = np.linspace(0.0, np.pi / 2, 40)
    xy = np.column_stack([30.0 * np.sin(theta), 30.0 * (1.0 - np.cos(theta))])
    route = RouteLaneModel.from_centerline(xy, lanelet_length=10.0)
    planner = InLaneCruisingPlanner(route, PlannerConfig(downsample_ratio=3, curve_parameterization='arc_length'))
    outcome = planner.plan([Maneuver.lane_following(0.0, route.route_length, 6.0)], PathPoint(0.0, 0.0))
    assert outcome.ok
    return outcome.path


def test_plot_planned_path(tmp_path, planned_path):
    try:
        from inlane_cruising.visualization import plot_planned_path
    except ImportError as e:
        pytest.skip(f"Visualization dependencies not available: {e}")

    output = plot_planned_path(planned_path, tmp_path / "plots" / "path.png")

    assert output.exists()
    assert output.stat().st_size > 0


def test_plot_rejects_empty_path(tmp_path):
    try:
        from inlane_cruising.visualization import plot_planned_path
    except ImportError as e:
        pytest.skip(f"Visualization dependencies not available: {e}")

    with pytest.raises(ValueError):
        plot_planned_path(PlannedPath(), tmp_path / "empty.png")
