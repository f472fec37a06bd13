# This code is licensed under the MIT License (see LICENSE file for details)

import numpy

def cumulative_distances(points, unit=True):
    """Return cumulative distances along a polyline.

    Parameters:
    points: array of shape (n,m) consisting of n points in m dimensions
    unit: if True, return distances divided by total length of the curve,
          if False, return actual arc lengths. A polyline of zero length
          yields all zeros in either case."""
    points = numpy.asarray(points, dtype=float)
    segment_lengths = numpy.sqrt(((points[:-1] - points[1:])**2).sum(axis=1))
    distances = numpy.concatenate([[0], numpy.add.accumulate(segment_lengths)])
    if unit and distances[-1] > 0:
        distances /= distances[-1]
    return distances

def polyline_length(points):
    """Return the total length of a polyline of shape (n, m)."""
    points = numpy.asarray(points, dtype=float)
    return numpy.sqrt(((points[:-1] - points[1:])**2).sum(axis=1)).sum()

def bounding_box(points):
    """Return (x_min, x_max, y_min, y_max) for an array of 2d points, or None
    if there are no points."""
    points = numpy.asarray(points, dtype=float).reshape(-1, 2)
    if len(points) == 0:
        return None
    x_min, y_min = points.min(axis=0)
    x_max, y_max = points.max(axis=0)
    return x_min, x_max, y_min, y_max

def distances_to_line(points, start, end):
    """Return the perpendicular distance from each 2d point to the infinite line
    through start and end.

    The distance is the magnitude of the 2d cross product of (point - start)
    with the unit vector along the chord. If start and end coincide, the
    plain distance to start is returned instead."""
    points = numpy.asarray(points, dtype=float)
    start = numpy.asarray(start, dtype=float)
    chord = numpy.asarray(end, dtype=float) - start
    offsets = points - start
    length = numpy.sqrt((chord**2).sum())
    if length == 0:
        return numpy.sqrt((offsets**2).sum(axis=-1))
    direction = chord / length
    return numpy.absolute(offsets[...,0]*direction[1] - offsets[...,1]*direction[0])

def douglas_peucker(points, epsilon):
    """Mark the points of a polyline retained by Douglas-Peucker simplification.

    Parameters:
        points: array of shape (n, 2)
        epsilon: maximum perpendicular deviation (in the units of the points)
            permitted for a discarded point.

    Returns: boolean array of shape (n,) which is True for each point to keep.
        The first and last points are always kept.

    Ranges still to be examined are held on a stack of (start, end) index
    pairs. The interiors of the ranges are disjoint, so each one writes only
    to its own slice of the single keep array.
    """
    points = numpy.asarray(points, dtype=float)
    n = len(points)
    keep = numpy.zeros(n, dtype=bool)
    if n == 0:
        return keep
    keep[[0, -1]] = True
    ranges = [(0, n - 1)]
    while ranges:
        start, end = ranges.pop()
        if end - start < 2:
            continue
        distances = distances_to_line(points[start+1:end], points[start], points[end])
        i = distances.argmax()
        if distances[i] > epsilon:
            split = start + 1 + i
            keep[split] = True
            ranges.append((split, end))
            ranges.append((start, split))
    return keep

def douglas_peucker_simplify(points, epsilon):
    """Return the subset of the polyline points that survive Douglas-Peucker
    simplification with tolerance epsilon."""
    points = numpy.asarray(points, dtype=float)
    return points[douglas_peucker(points, epsilon)]

def find_perp(p0, p1, unit=True):
    """Return a perpendicular to line p0-p1, optionally of unit-length.

    Parameters:
    p0 and p1 can be arrays of shape (2) each representing a single point,
    or of (n,2) containing n points. The returned array is either a
    array of shape (2) containing one or of shape (n,2) contaning n perpendiculars.
    Zero-length lines give zero vectors even if unit is True."""
    p0 = numpy.asarray(p0, dtype=float)
    p1 = numpy.asarray(p1, dtype=float)
    diff = p1 - p0
    diff = numpy.roll(diff, 1, axis=-1)
    diff[...,0] *= -1
    if unit:
        lengths = numpy.sqrt(numpy.sum(diff**2, axis=-1))[...,numpy.newaxis]
        diff = numpy.divide(diff, lengths, out=numpy.zeros_like(diff), where=lengths > 0)
    return diff
