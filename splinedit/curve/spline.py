# This code is licensed under the MIT License (see LICENSE file for details)

import numpy
from scipy import interpolate

# relative slack allowed past the last node before evaluation is refused
DOMAIN_TOLERANCE = 1e-4

class DomainError(ValueError):
    """Raised when a spline is evaluated outside of its parameter range."""
    pass

def second_derivatives(nodes, values):
    """Solve for the second derivatives of the natural cubic spline through
    the points (nodes[i], values[i]).

    Parameters:
        nodes: strictly increasing array of n abscissas
        values: array of n ordinates

    Returns: array M of length n+1 (the final element is unused by evaluation
        and always zero). M[0] and M[n-1] are zero by the natural boundary
        condition; for n <= 2 the whole array is zero.

    The tridiagonal system
        lam_i M[i-1] + 2 M[i] + (1-lam_i) M[i+1] = 6 f[x_{i-1}, x_i, x_{i+1}]
    with lam_i = h_i / (h_i + h_{i+1}) is solved by the Thomas algorithm in O(n).
    """
    nodes = numpy.asarray(nodes, dtype=float)
    values = numpy.asarray(values, dtype=float)
    n = len(nodes)
    M = numpy.zeros(n + 1, dtype=float)
    if n <= 2:
        return M
    h = numpy.diff(nodes)
    # first divided differences are negated here, so that the second
    # differences below come out with the usual sign.
    d1 = (values[:-1] - values[1:]) / h
    d2 = 6 * (d1[:-1] - d1[1:]) / (nodes[2:] - nodes[:-2])

    # q[n-1] = u[n-1] = 0 is the natural boundary row
    q = numpy.zeros(n, dtype=float)
    u = numpy.zeros(n, dtype=float)
    for i in range(1, n - 1):
        lam = h[i-1] / (h[i-1] + h[i])
        p = lam * q[i-1] + 2
        q[i] = (lam - 1) / p
        u[i] = (d2[i-1] - lam * u[i-1]) / p

    M[n-1] = u[n-1]
    for i in range(n - 2, 0, -1):
        M[i] = u[i] + q[i] * M[i+1]
    return M


class ScalarSpline:
    def __init__(self, nodes, values, tolerance=DOMAIN_TOLERANCE):
        """Fit a natural cubic spline through (nodes, values).

        Parameters:
            nodes: strictly increasing sequence of n abscissas. (Not checked:
                repeated or decreasing nodes give meaningless results.)
            values: sequence of n ordinates.
            tolerance: relative slack permitted beyond the last node when
                evaluating, to absorb floating-point drift in parameters.

        Splines with n <= 2 have all-zero second derivatives: two points
        interpolate linearly, one point is a constant, and zero points
        evaluate to zero everywhere.
        """
        self.nodes = numpy.array(nodes, dtype=float).reshape(-1)
        self.values = numpy.array(values, dtype=float).reshape(-1)
        if len(self.nodes) != len(self.values):
            raise ValueError('Spline nodes and values must have equal lengths (got {} and {}).'.format(
                len(self.nodes), len(self.values)))
        self.tolerance = tolerance
        self.second_derivatives = second_derivatives(self.nodes, self.values)
        self.nodes.flags.writeable = False
        self.values.flags.writeable = False
        self.second_derivatives.flags.writeable = False

    def __len__(self):
        return len(self.nodes)

    def __repr__(self):
        return '{}(n={}, domain={})'.format(type(self).__name__, len(self), self.domain)

    @property
    def domain(self):
        """(first, last) node, or None for an empty spline."""
        if len(self.nodes) == 0:
            return None
        return self.nodes[0], self.nodes[-1]

    def upper_limit(self):
        last = self.nodes[-1]
        return last + abs(last) * self.tolerance

    def in_domain(self, x):
        """Return whether x (scalar or array) can be evaluated."""
        x = numpy.asarray(x, dtype=float)
        if len(self.nodes) <= 1:
            return numpy.ones(x.shape, dtype=bool) if x.ndim else True
        # NaN compares False on both sides, so it falls out of the domain
        ok = (x >= self.nodes[0]) & (x <= self.upper_limit())
        return ok if x.ndim else bool(ok)

    def _check_domain(self, x):
        ok = self.in_domain(x)
        if not numpy.all(ok):
            bad = numpy.asarray(x)[~numpy.asarray(ok)] if numpy.ndim(x) else x
            raise DomainError('Parameter {} outside spline domain [{}, {}].'.format(
                numpy.ravel(bad)[0], self.nodes[0], self.nodes[-1]))

    def _intervals(self, x):
        # index i such that nodes[i-1] <= x <= nodes[i], clamped to [1, n-1]
        i = numpy.searchsorted(self.nodes, x, side='left')
        return numpy.clip(i, 1, len(self.nodes) - 1)

    def evaluate(self, x):
        """Evaluate the spline at x, which may be a scalar or an array.

        Raises DomainError if any value of x lies below the first node or
        beyond the last node (plus the relative tolerance)."""
        scalar = numpy.ndim(x) == 0
        x = numpy.asarray(x, dtype=float)
        n = len(self.nodes)
        if n == 0:
            out = numpy.zeros(x.shape)
        elif n == 1:
            out = numpy.full(x.shape, self.values[0])
        else:
            self._check_domain(x)
            i = self._intervals(x)
            nodes, values, M = self.nodes, self.values, self.second_derivatives
            h = nodes[i] - nodes[i-1]
            t1 = nodes[i] - x
            t2 = x - nodes[i-1]
            out = (M[i-1]/6 * t1**3 + M[i]/6 * t2**3 +
                (values[i-1] - M[i-1]/6 * h**2) * t1 +
                (values[i] - M[i]/6 * h**2) * t2) / h
        return float(out) if scalar else out

    __call__ = evaluate

    def derivative(self, x, order=1):
        """Evaluate the order-th derivative of the spline at x (scalar or array).

        The same domain rules as evaluate() apply. Splines with fewer than two
        nodes have zero derivative everywhere."""
        scalar = numpy.ndim(x) == 0
        x = numpy.asarray(x, dtype=float)
        if len(self.nodes) <= 1:
            out = numpy.zeros(x.shape)
        else:
            self._check_domain(x)
            out = self.to_ppoly().derivative(order)(x)
        return float(out) if scalar else out

    def to_ppoly(self):
        """Return the spline as a scipy.interpolate.PPoly, with coefficients in
        the local power basis of each interval."""
        n = len(self.nodes)
        if n < 2:
            raise ValueError('At least two nodes are required to construct a piecewise polynomial.')
        nodes, values, M = self.nodes, self.values, self.second_derivatives
        h = numpy.diff(nodes)
        M0 = M[:n-1]
        M1 = M[1:n]
        a = (values[:-1] - M0/6 * h**2) / h
        b = (values[1:] - M1/6 * h**2) / h
        c = numpy.empty((4, n-1))
        c[0] = (M1 - M0) / (6 * h)
        c[1] = M0 / 2
        c[2] = b - a - M0 * h / 2
        c[3] = values[:-1]
        return interpolate.PPoly(c, nodes, extrapolate=True)
