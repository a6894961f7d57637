"""Tests for the route lane model."""

import pytest
import numpy as np

from inlane_cruising.core.data_structures import PathPoint
from inlane_cruising.world.lane_model import Lanelet, RouteLaneModel


@pytest.fixture
def route():
    return RouteLaneModel([
        Lanelet('a', [[0.0, 0.0], [10.0, 0.0]]),
        Lanelet('b', [[10.0, 0.0], [15.0, 0.0], [20.0, 0.0]]),
        Lanelet('c', [[20.0, 0.0], [30.0, 0.0]]),
    ])


def test_route_length(route):
    assert route.route_length == 30.0
    assert route.lanelets[1].length == 10.0


def test_lanelets_between_inclusive_endpoints(route):
    ids = [ll.id for ll in route.lanelets_between(0.0, 10.0)]
    assert ids == ['a', 'b']


def test_lanelets_between_inside_one_lanelet(route):
    assert [ll.id for ll in route.lanelets_between(12.0, 18.0)] == ['b']


def test_lanelets_between_spanning_route(route):
    assert [ll.id for ll in route.lanelets_between(5.0, 25.0)] == ['a', 'b', 'c']


def test_lanelets_between_past_route_end(route):
    assert route.lanelets_between(40.0, 50.0) == []


def test_lanelets_between_rejects_reversed_interval(route):
    with pytest.raises(ValueError):
        route.lanelets_between(10.0, 5.0)


def test_concatenate_geometry_drops_shared_points(route):
    points = route.concatenate_geometry(route.lanelets)
    assert [p.x for p in points] == [0.0, 10.0, 15.0, 20.0, 30.0]
    assert all(p.y == 0.0 for p in points)


def test_concatenate_geometry_keeps_disjoint_points():
    first = Lanelet('a', [[0.0, 0.0], [10.0, 0.0]])
    second = Lanelet('b', [[10.0, 1.0], [20.0, 1.0]])
    model = RouteLaneModel([first, second])

    points = model.concatenate_geometry([first, second])

    assert points == [PathPoint(0.0, 0.0), PathPoint(10.0, 0.0), PathPoint(10.0, 1.0), PathPoint(20.0, 1.0)]


def test_concatenate_geometry_empty(route):
    assert route.concatenate_geometry([]) == []


def test_from_centerline_splits_route():
    xy = np.column_stack([np.arange(31, dtype=float), np.zeros(31)])

    model = RouteLaneModel.from_centerline(xy, lanelet_length=10.0)

    assert len(model.lanelets) == 3
    assert model.route_length == 30.0
    points = model.concatenate_geometry(model.lanelets)
    assert len(points) == 31
    assert points[-1] == PathPoint(30.0, 0.0)


def test_from_centerline_accepts_path_points():
    points = [PathPoint(float(i), 0.5 * i) for i in range(5)]
    model = RouteLaneModel.from_centerline(points, lanelet_length=100.0)
    assert len(model.lanelets) == 1
    assert model.concatenate_geometry(model.lanelets) == points


@pytest.mark.parametrize("centerline", [[[0.0, 0.0]], [[0.0, 0.0, 0.0], [1.0, 1.0, 1.0]]])
def test_lanelet_validation(centerline):
    with pytest.raises(ValueError):
        Lanelet('bad', centerline)


def test_empty_route():
    with pytest.raises(ValueError):
        RouteLaneModel([])


def test_from_centerline_validation():
    with pytest.raises(ValueError):
        RouteLaneModel.from_centerline([PathPoint(0.0, 0.0)])
    with pytest.raises(ValueError):
        RouteLaneModel.from_centerline([PathPoint(0.0, 0.0), PathPoint(1.0, 0.0)], lanelet_length=0.0)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
