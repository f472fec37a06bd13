# This code is licensed under the MIT License (see LICENSE file for details)

import logging

import numpy

from . import geometry
from .spline import ScalarSpline, DomainError

logger = logging.getLogger(__name__)

# render samples per control node after a node is appended
SAMPLES_PER_NODE = 10

class ParametricCurve:
    def __init__(self, xs, ys, ts, samples=None):
        """A plane curve (x(t), y(t)) built from two natural cubic splines that
        share the parameter nodes ts.

        Parameters:
            xs, ys: control-point coordinates, n values each.
            ts: strictly increasing parameter values of the control points.
            samples: parameter values at which the curve is drawn or exported.
                If None, a copy of ts is used.

        The bounding box of the raw control points is computed here once and
        is not updated from the fitted curve (which may overshoot it).
        """
        xs = numpy.asarray(xs, dtype=float).reshape(-1)
        ys = numpy.asarray(ys, dtype=float).reshape(-1)
        ts = numpy.asarray(ts, dtype=float).reshape(-1)
        if not len(xs) == len(ys) == len(ts):
            raise ValueError('Curve coordinates and parameters must have equal lengths (got {}, {}, {}).'.format(
                len(xs), len(ys), len(ts)))
        self.x_spline = ScalarSpline(ts, xs)
        self.y_spline = ScalarSpline(ts, ys)
        self.bounds = geometry.bounding_box(numpy.transpose([xs, ys]))
        self._samples = ts.copy() if samples is None else self._as_samples(samples)

    @classmethod
    def from_points(cls, points, parameterization='uniform', samples=None):
        """Construct a curve through an array of points of shape (n, 2).

        Parameters:
            points: control points.
            parameterization: 'uniform' spaces the parameters evenly over [0, 1];
                'chord' places them at the normalized cumulative distance along
                the polyline through the points, which is closer to the natural
                (arc-length) parameterization. Points repeated back-to-back
                give repeated parameters under 'chord' and must be removed first.
            samples: as for the constructor.
        """
        points = numpy.asarray(points, dtype=float).reshape(-1, 2)
        if parameterization == 'uniform':
            ts = numpy.linspace(0, 1, len(points))
        elif parameterization == 'chord':
            ts = geometry.cumulative_distances(points, unit=True) if len(points) else numpy.empty(0)
        else:
            raise ValueError('parameterization must be "uniform" or "chord".')
        return cls(points[:,0], points[:,1], ts, samples)

    def __len__(self):
        return len(self.x_spline)

    def __repr__(self):
        return '{}(n={}, samples={})'.format(type(self).__name__, len(self), len(self._samples))

    @property
    def xs(self):
        return self.x_spline.values

    @property
    def ys(self):
        return self.y_spline.values

    @property
    def ts(self):
        return self.x_spline.nodes

    @property
    def control_points(self):
        return numpy.transpose([self.xs, self.ys]).reshape(-1, 2)

    @property
    def domain(self):
        return self.x_spline.domain

    @property
    def samples(self):
        return self._samples

    @samples.setter
    def samples(self, params):
        self.set_samples(params)

    @staticmethod
    def _as_samples(params):
        params = numpy.array(params, dtype=float).reshape(-1)
        if len(params) == 0:
            raise ValueError('Sample list may not be empty.')
        return params

    def set_samples(self, params):
        """Replace the render/export sample parameters wholesale."""
        self._samples = self._as_samples(params)

    def resample(self, count):
        """Set count evenly-spaced samples spanning the curve's domain."""
        if count < 1:
            raise ValueError('Sample count must be positive.')
        domain = self.domain
        if domain is None:
            raise ValueError('Cannot resample a curve with no nodes.')
        self.set_samples(numpy.linspace(domain[0], domain[1], count))

    def append_node(self, x, y):
        """Add a control point at the end of the curve.

        All n+1 control points are re-parameterized evenly over [0, 1], both
        splines are refit from scratch, and the samples are reset to
        SAMPLES_PER_NODE * (n+1) evenly-spaced values over [0, 1]."""
        xs = numpy.append(self.xs, x)
        ys = numpy.append(self.ys, y)
        n = len(xs)
        ts = numpy.linspace(0, 1, n)
        self.x_spline = ScalarSpline(ts, xs)
        self.y_spline = ScalarSpline(ts, ys)
        self.bounds = geometry.bounding_box(numpy.transpose([xs, ys]))
        self._samples = numpy.linspace(0, 1, SAMPLES_PER_NODE * n)

    def evaluate(self, t):
        """Return the curve position at parameter t.

        For a scalar t, returns a tuple (x, y); for an array of m parameters
        returns an array of shape (m, 2). Raises DomainError if t is out of
        range for either spline."""
        x = self.x_spline.evaluate(t)
        y = self.y_spline.evaluate(t)
        if numpy.ndim(t) == 0:
            return x, y
        return numpy.stack([x, y], axis=-1)

    __call__ = evaluate

    def derivative(self, t, order=1):
        """Return the order-th derivative (dx/dt, dy/dt) at parameter(s) t, in
        the same form as evaluate()."""
        dx = self.x_spline.derivative(t, order)
        dy = self.y_spline.derivative(t, order)
        if numpy.ndim(t) == 0:
            return dx, dy
        return numpy.stack([dx, dy], axis=-1)

    def iter_points(self):
        """Yield the (x, y) position at each sample, in sample order.

        Samples that fall outside the curve's domain are logged and skipped.
        Each call starts a fresh iteration."""
        for t in self._samples:
            try:
                yield self.evaluate(t)
            except DomainError as e:
                logger.warning('Skipping sample: %s', e)

    def polyline(self):
        """Return the points at all in-domain samples as an array of shape (m, 2)."""
        valid = numpy.asarray(self.x_spline.in_domain(self._samples), dtype=bool)
        if not valid.all():
            logger.warning('Skipping %d of %d samples outside curve domain %s',
                (~valid).sum(), len(valid), self.domain)
        return self.evaluate(self._samples[valid]).reshape(-1, 2)
