"""Tests for curve fitting through path points."""

import pytest
import numpy as np

from inlane_cruising.core.data_structures import DiagnosticLevel, PathPoint, PointSpeedPair
from inlane_cruising.planning.curve_fitting import (
    ArcLengthSplineCurve,
    FittedCurve,
    XSplineCurve,
    fit_curve,
)


@pytest.fixture
def monotonic_points():
    x = [0.0, 1.0, 2.5, 4.0, 6.0]
    y = [0.0, 0.5, 1.5, 1.0, -0.5]
    return [PathPoint(xi, yi) for xi, yi in zip(x, y)]


@pytest.fixture
def hairpin_points():
    x = [0.0, 10.0, 15.0, 10.0, 0.0]
    y = [0.0, 0.0, 5.0, 10.0, 10.0]
    return [PathPoint(xi, yi) for xi, yi in zip(x, y)]


@pytest.mark.parametrize("n", [0, 1, 2])
def test_insufficient_points_returns_empty_result(n):
    points = [PathPoint(float(i), 0.0) for i in range(n)]

    result = fit_curve(points)

    assert not result.ok
    assert result.curve is None
    assert len(result.diagnostics) == 1
    assert result.diagnostics[0].code == 'insufficient_points'
    assert result.diagnostics[0].level == DiagnosticLevel.WARNING


@pytest.mark.parametrize("parameterization", ['x', 'arc_length'])
def test_insufficient_points_any_parameterization(parameterization):
    result = fit_curve([PathPoint(0.0, 0.0), PathPoint(1.0, 1.0)], parameterization)
    assert result.curve is None


def test_x_fit_interpolates_every_point(monotonic_points):
    result = fit_curve(monotonic_points)

    assert result.ok
    assert isinstance(result.curve, XSplineCurve)
    assert result.diagnostics == []
    for p in monotonic_points:
        x, y = result.curve.calc_position(p.x)
        assert x == p.x
        assert abs(y - p.y) < 1e-9


def test_fit_accepts_point_speed_pairs(monotonic_points):
    pairs = [PointSpeedPair(p, 4.0) for p in monotonic_points]
    result = fit_curve(pairs)
    assert result.ok
    assert list(result.curve.points) == monotonic_points


def test_x_fit_rejects_hairpin(hairpin_points):
    result = fit_curve(hairpin_points, 'x')

    assert not result.ok
    assert result.diagnostics[-1].code == 'non_monotonic_x'
    assert result.diagnostics[-1].level == DiagnosticLevel.ERROR


def test_arc_length_fit_handles_hairpin(hairpin_points):
    result = fit_curve(hairpin_points, 'arc_length')

    assert result.ok
    curve = result.curve
    assert isinstance(curve, ArcLengthSplineCurve)
    assert curve.parameters[0] == 0.0
    for t, p in zip(curve.parameters, hairpin_points):
        x, y = curve.calc_position(t)
        assert abs(x - p.x) < 1e-9
        assert abs(y - p.y) < 1e-9


def test_consecutive_duplicates_are_collapsed():
    points = [PathPoint(0.0, 0.0), PathPoint(0.0, 0.0), PathPoint(1.0, 1.0), PathPoint(2.0, 0.0)]

    result = fit_curve(points)

    assert result.ok
    assert len(result.curve) == 3
    assert [d.code for d in result.diagnostics] == ['duplicates_removed']


def test_duplicates_leaving_too_few_points():
    points = [PathPoint(0.0, 0.0), PathPoint(0.0, 0.0), PathPoint(1.0, 1.0)]

    result = fit_curve(points)

    assert not result.ok
    assert [d.code for d in result.diagnostics] == ['duplicates_removed', 'insufficient_points']


def test_fitted_curve_is_abstract(monotonic_points):
    with pytest.raises(TypeError):
        FittedCurve(monotonic_points, [p.x for p in monotonic_points])


def test_unknown_parameterization():
    with pytest.raises(ValueError):
        fit_curve([PathPoint(0.0, 0.0)] * 3, 'time')


def test_sample_includes_endpoints(monotonic_points):
    curve = fit_curve(monotonic_points).curve

    samples = curve.sample(1.0)

    assert [p.x for p in samples] == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    assert samples[0] == monotonic_points[0]
    assert abs(samples[-1].y - monotonic_points[-1].y) < 1e-9


def test_sample_arc_length_spacing(hairpin_points):
    curve = fit_curve(hairpin_points, 'arc_length').curve

    samples = curve.sample(0.5)
    xy = np.array([(p.x, p.y) for p in samples])
    steps = np.hypot(np.diff(xy[:, 0]), np.diff(xy[:, 1]))

    assert len(samples) > len(hairpin_points)
    assert np.all(steps > 0.0)
    assert np.all(steps < 0.75)


def test_sample_rejects_non_positive_spacing(monotonic_points):
    curve = fit_curve(monotonic_points).curve
    with pytest.raises(ValueError):
        curve.sample(0.0)


def test_x_curve_yaw_and_curvature_on_line():
    curve = fit_curve([PathPoint(0.0, 0.0), PathPoint(1.0, 1.0), PathPoint(2.0, 2.0)]).curve

    assert abs(curve.calc_yaw(0.5) - np.pi / 4) < 1e-9
    assert abs(curve.calc_curvature(1.5)) < 1e-9
    assert curve.calc_yaw(3.0) is None


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
