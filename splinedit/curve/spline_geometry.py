# This code is licensed under the MIT License (see LICENSE file for details)

import numpy

from . import geometry

# resolution of the polyline approximation used for simplification
DENSE_COUNT = 32768

def dense_parameters(curve, count=DENSE_COUNT):
    """Return count evenly-spaced parameter values spanning the whole domain
    of a ParametricCurve (empty if the curve has no nodes)."""
    domain = curve.domain
    if domain is None:
        return numpy.empty(0)
    return numpy.linspace(domain[0], domain[1], count)

def dense_points(curve, count=DENSE_COUNT):
    """Evaluate a curve at count evenly-spaced parameters.

    Returns: (parameters, points), arrays of shape (count,) and (count, 2)."""
    params = dense_parameters(curve, count)
    return params, curve.evaluate(params).reshape(-1, 2)

def simplify(curve, epsilon, count=DENSE_COUNT):
    """Choose a sparse set of sample parameters that represents a curve to
    within a given tolerance, by Douglas-Peucker simplification of a dense
    polyline approximation.

    Parameters:
        curve: ParametricCurve
        epsilon: maximum distance, in the curve's x,y units, between a dropped
            dense point and the simplified polyline segment spanning it.
        count: number of points in the dense approximation.

    Returns: array of the retained parameter values, in increasing order. The
        first and last dense parameters are always retained. Flat stretches of
        the curve receive few samples, tightly curved stretches many.
        The curve itself is not modified (see simplify_in_place).

    Curves with fewer than two nodes have no extent to simplify; a copy of
    their nodes is returned.
    """
    if epsilon < 0:
        raise ValueError('Simplification tolerance must be non-negative.')
    if len(curve) < 2:
        return numpy.array(curve.ts)
    params, points = dense_points(curve, count)
    keep = geometry.douglas_peucker(points, epsilon)
    return params[keep]

def simplify_in_place(curve, epsilon, count=DENSE_COUNT):
    """Replace the curve's samples with the result of simplify(); return them."""
    samples = simplify(curve, epsilon, count)
    if len(samples):
        curve.set_samples(samples)
    return samples

def arc_length(curve, num_points=None):
    """Approximate the arc-length of a curve by evaluating it at num_points
    positions and calculating the length of the resulting polyline.
    If num_points is None, use ten points per node or 100, whichever is greater."""
    if num_points is None:
        num_points = max(100, 10 * len(curve))
    params, points = dense_points(curve, num_points)
    return geometry.polyline_length(points)

def perpendiculars(curve, params, unit=True):
    """Return vectors perpendicular to a curve.

    Parameters:
        curve: ParametricCurve
        params: set of parameter values at which to return the perpendiculars.
        unit: normalize prependiculars to unit length.

    Returns: array of shape (len(params), 2), containing the 2D vectors
        describing each perpendicular (the tangent rotated a quarter turn
        counterclockwise).
    """
    tangents = curve.derivative(numpy.asarray(params, dtype=float).reshape(-1))
    return geometry.find_perp(numpy.zeros_like(tangents), tangents, unit)
