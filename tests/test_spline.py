"""Tests for fitting and evaluating natural cubic splines."""

import numpy
import pytest
from scipy import interpolate

from splinedit.curve.spline import ScalarSpline, DomainError, second_derivatives


def _random_nodes(rng, n):
    return numpy.cumsum(rng.uniform(0.1, 2.0, size=n))


def test_three_point_scenario() -> None:
    """A symmetric bump is exact at its peak and rejects far out-of-range parameters."""
    spline = ScalarSpline([0, 0.5, 1], [0, 1, 0])
    assert spline.evaluate(0.5) == pytest.approx(1)
    # within the relative tolerance past the last node
    assert numpy.isfinite(spline.evaluate(1.0001))
    with pytest.raises(DomainError):
        spline.evaluate(2.0)
    with pytest.raises(DomainError):
        spline.evaluate(-0.1)


def test_natural_boundary_and_layout() -> None:
    nodes = [0, 1, 3, 4, 7]
    M = second_derivatives(nodes, [1, -2, 0, 5, 2])
    assert len(M) == len(nodes) + 1
    assert M[0] == 0
    assert M[len(nodes)] == 0
    assert M[len(nodes) - 1] == 0
    assert numpy.any(M[1:-2] != 0)


def test_interpolates_nodes() -> None:
    """Evaluating at each node reproduces its value."""
    rng = numpy.random.default_rng(0)
    for n in range(3, 25):
        nodes = _random_nodes(rng, n)
        values = rng.normal(size=n)
        spline = ScalarSpline(nodes, values)
        numpy.testing.assert_allclose(spline.evaluate(nodes), values, atol=1e-9)
        for node, value in zip(nodes, values):
            assert spline.evaluate(node) == pytest.approx(value, abs=1e-9)


def test_matches_scipy_natural_spline() -> None:
    rng = numpy.random.default_rng(1)
    nodes = _random_nodes(rng, 12)
    values = rng.normal(size=12)
    spline = ScalarSpline(nodes, values)
    reference = interpolate.CubicSpline(nodes, values, bc_type='natural')
    x = numpy.linspace(nodes[0], nodes[-1], 500)
    numpy.testing.assert_allclose(spline.evaluate(x), reference(x), atol=1e-9)
    numpy.testing.assert_allclose(spline.second_derivatives[:len(nodes)], reference(nodes, 2), atol=1e-8)
    numpy.testing.assert_allclose(spline.derivative(x), reference(x, 1), atol=1e-8)


def test_ppoly_export() -> None:
    spline = ScalarSpline([0, 1, 2.5, 3], [2, 0, 1, 4])
    ppoly = spline.to_ppoly()
    x = numpy.linspace(0, 3, 61)
    numpy.testing.assert_allclose(ppoly(x), spline.evaluate(x), atol=1e-12)
    with pytest.raises(ValueError):
        ScalarSpline([1], [1]).to_ppoly()


def test_degenerate_sizes() -> None:
    empty = ScalarSpline([], [])
    assert len(empty) == 0
    assert empty.domain is None
    assert empty.evaluate(0.3) == 0
    numpy.testing.assert_array_equal(empty.evaluate([0, 1, 2]), [0, 0, 0])

    point = ScalarSpline([0.5], [7])
    assert point.evaluate(0.5) == 7
    assert point.evaluate(3) == 7
    assert point.derivative(0.5) == 0
    numpy.testing.assert_array_equal(point.second_derivatives, [0, 0])

    line = ScalarSpline([0, 1], [1, 3])
    numpy.testing.assert_array_equal(line.second_derivatives, [0, 0, 0])
    assert line.evaluate(0.25) == pytest.approx(1.5)
    assert line.derivative(0.7) == pytest.approx(2)


def test_array_evaluation() -> None:
    spline = ScalarSpline([0, 1, 2], [0, 1, 4])
    out = spline.evaluate(numpy.array([0, 0.5, 2]))
    assert out.shape == (3,)
    assert isinstance(spline.evaluate(1), float)
    with pytest.raises(DomainError):
        spline.evaluate([0, 1, 2.5])
    with pytest.raises(DomainError):
        spline.evaluate(numpy.nan)


def test_in_domain() -> None:
    spline = ScalarSpline([0, 1, 2], [0, 1, 4])
    numpy.testing.assert_array_equal(spline.in_domain([-1, 0, 2, 2.0001, 3]), [False, True, True, True, False])
    assert spline.in_domain(1.5) is True
    assert spline.in_domain(5) is False


def test_mismatched_lengths() -> None:
    with pytest.raises(ValueError):
        ScalarSpline([0, 1, 2], [0, 1])


def test_spline_data_is_immutable() -> None:
    spline = ScalarSpline([0, 1, 2], [0, 1, 4])
    with pytest.raises(ValueError):
        spline.values[0] = 5
