"""Tests for curve simplification and measurement."""

import numpy
import pytest

from splinedit import config
from splinedit.curve import geometry
from splinedit.curve import spline_geometry
from splinedit.curve.parametric import ParametricCurve


def _demo_curve():
    ts = numpy.linspace(0, 1, len(config.DEMO_XS))
    return ParametricCurve(config.DEMO_XS, config.DEMO_YS, ts)


def test_straight_curve_simplifies_to_endpoints() -> None:
    curve = ParametricCurve([0, 1, 2], [0, 1, 2], [0, 0.5, 1])
    for epsilon in (1e-6, 0.1, 10):
        samples = spline_geometry.simplify(curve, epsilon)
        numpy.testing.assert_array_equal(samples, [0, 1])


def test_simplify_is_monotonic_in_epsilon() -> None:
    curve = _demo_curve()
    counts = [len(spline_geometry.simplify(curve, epsilon, count=4096)) for epsilon in (0.01, 0.1, 0.5, 2, 10)]
    assert counts == sorted(counts, reverse=True)
    assert counts[0] > counts[-1]


def test_simplify_keeps_endpoints_and_tolerance() -> None:
    curve = _demo_curve()
    epsilon = 0.25
    count = 4096
    samples = spline_geometry.simplify(curve, epsilon, count=count)
    params, points = spline_geometry.dense_points(curve, count)
    assert samples[0] == params[0]
    assert samples[-1] == params[-1]
    assert numpy.all(numpy.diff(samples) > 0)
    # every dense point lies within epsilon of the chord spanning it
    kept = numpy.searchsorted(params, samples)
    for start, end in zip(kept[:-1], kept[1:]):
        distances = geometry.distances_to_line(points[start:end+1], points[start], points[end])
        assert distances.max() <= epsilon


def test_simplify_does_not_modify_curve() -> None:
    curve = _demo_curve()
    original = curve.samples.copy()
    samples = spline_geometry.simplify(curve, 1, count=2048)
    numpy.testing.assert_array_equal(curve.samples, original)
    result = spline_geometry.simplify_in_place(curve, 1, count=2048)
    numpy.testing.assert_array_equal(result, samples)
    numpy.testing.assert_array_equal(curve.samples, samples)


def test_simplify_degenerate_curves() -> None:
    empty = ParametricCurve([], [], [])
    assert len(spline_geometry.simplify(empty, 1)) == 0
    point = ParametricCurve([3], [4], [0])
    numpy.testing.assert_array_equal(spline_geometry.simplify(point, 1), [0])
    with pytest.raises(ValueError):
        spline_geometry.simplify(_demo_curve(), -1)


def test_dense_parameters_span_domain() -> None:
    curve = ParametricCurve([0, 1, 2], [0, 1, 0], [2, 3, 5])
    params = spline_geometry.dense_parameters(curve, 11)
    assert params[0] == 2
    assert params[-1] == 5
    assert len(params) == 11
    assert len(spline_geometry.dense_parameters(ParametricCurve([], [], []))) == 0


def test_arc_length_and_perpendiculars() -> None:
    curve = ParametricCurve([0, 1.5, 3], [0, 2, 4], [0, 0.5, 1])
    assert spline_geometry.arc_length(curve) == pytest.approx(5)
    perps = spline_geometry.perpendiculars(curve, [0.2, 0.8])
    numpy.testing.assert_allclose(perps, [[-0.8, 0.6], [-0.8, 0.6]])
