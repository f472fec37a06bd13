"""Tests for the polyline helpers and Douglas-Peucker marking."""

import numpy
import pytest

from splinedit.curve import geometry


def test_cumulative_distances() -> None:
    points = [(0, 0), (3, 4), (3, 10)]
    numpy.testing.assert_allclose(geometry.cumulative_distances(points, unit=False), [0, 5, 11])
    numpy.testing.assert_allclose(geometry.cumulative_distances(points), [0, 5/11, 1])
    # a polyline that never moves should not produce NaNs
    numpy.testing.assert_array_equal(geometry.cumulative_distances([(1, 1), (1, 1)]), [0, 0])


def test_polyline_length_and_bounds() -> None:
    points = [(0, 0), (3, 4), (3, -2)]
    assert geometry.polyline_length(points) == pytest.approx(11)
    assert geometry.bounding_box(points) == (0, 3, -2, 4)
    assert geometry.bounding_box(numpy.empty((0, 2))) is None


def test_distances_to_line() -> None:
    points = numpy.array([(0, 1), (5, -2), (-3, 0)])
    numpy.testing.assert_allclose(geometry.distances_to_line(points, (0, 0), (1, 0)), [1, 2, 0])
    # degenerate chord: distance to the shared endpoint
    numpy.testing.assert_allclose(geometry.distances_to_line(points, (0, 0), (0, 0)), [1, numpy.sqrt(29), 3])


def test_straight_line_keeps_endpoints() -> None:
    points = numpy.transpose([numpy.linspace(0, 10, 101), numpy.linspace(0, 5, 101)])
    keep = geometry.douglas_peucker(points, 1e-9)
    assert keep.sum() == 2
    assert keep[0] and keep[-1]


def test_peak_is_retained() -> None:
    points = [(0, 0), (1, 0.1), (2, 1), (3, 0.1), (4, 0)]
    keep = geometry.douglas_peucker(points, 0.5)
    numpy.testing.assert_array_equal(keep, [True, False, True, False, True])
    # larger than the peak height: only the endpoints survive
    keep = geometry.douglas_peucker(points, 1.5)
    numpy.testing.assert_array_equal(keep, [True, False, False, False, True])
    simplified = geometry.douglas_peucker_simplify(points, 0.5)
    numpy.testing.assert_array_equal(simplified, [(0, 0), (2, 1), (4, 0)])


def test_closed_loop() -> None:
    """With the first and last point equal, distances are measured from that point."""
    square = [(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]
    keep = geometry.douglas_peucker(square, 0.1)
    assert keep.all()


def test_small_inputs() -> None:
    assert len(geometry.douglas_peucker(numpy.empty((0, 2)), 1)) == 0
    numpy.testing.assert_array_equal(geometry.douglas_peucker([(1, 2)], 1), [True])
    numpy.testing.assert_array_equal(geometry.douglas_peucker([(1, 2), (3, 4)], 1), [True, True])


def test_find_perp() -> None:
    numpy.testing.assert_allclose(geometry.find_perp(numpy.array([0, 0]), numpy.array([2, 0])), [0, 1])
    perps = geometry.find_perp(numpy.zeros((2, 2)), numpy.array([[0, 3], [0, 0]]))
    numpy.testing.assert_allclose(perps, [[-1, 0], [0, 0]])
