# This code is licensed under the MIT License (see LICENSE file for details)

import collections
import logging

from .curve.parametric import ParametricCurve

logger = logging.getLogger(__name__)

MAX_CURVES = 128

Handle = collections.namedtuple('Handle', ('index', 'generation'))

class CapacityError(RuntimeError):
    """Raised when a curve is added to a registry with no free slots."""
    pass

class NotFoundError(KeyError):
    """Raised when a handle does not refer to a curve currently in the registry."""
    def __str__(self):
        return str(self.args[0]) if self.args else ''

class CurveRegistry:
    def __init__(self, capacity=MAX_CURVES):
        """Fixed-capacity table of ParametricCurve slots.

        Curves are referred to by Handle(index, generation). Every time a
        slot is vacated its generation is incremented, so a handle to a
        deleted curve never refers to a later curve placed in the same slot.

        The registry has no internal locking: callers sharing one between
        threads must ensure only one of them uses it at a time.
        """
        if capacity < 1:
            raise ValueError('Registry capacity must be positive.')
        self.capacity = capacity
        self._curves = [None] * capacity
        self._generations = [0] * capacity

    def __len__(self):
        return sum(curve is not None for curve in self._curves)

    def __repr__(self):
        return '{}({}/{} slots used)'.format(type(self).__name__, len(self), self.capacity)

    def __contains__(self, handle):
        try:
            self.lookup(handle)
        except NotFoundError:
            return False
        return True

    def __getitem__(self, handle):
        return self.lookup(handle)

    def __iter__(self):
        return iter(self.handles())

    def handles(self):
        """Return the handles of all occupied slots, in slot order."""
        return [Handle(i, self._generations[i]) for i, curve in enumerate(self._curves) if curve is not None]

    def items(self):
        """Return (handle, curve) pairs for all occupied slots, in slot order."""
        return [(Handle(i, self._generations[i]), curve) for i, curve in enumerate(self._curves) if curve is not None]

    def curves(self):
        return [curve for curve in self._curves if curve is not None]

    def add(self, curve):
        """Place a ParametricCurve in the lowest-numbered free slot and return its handle.

        Raises CapacityError if every slot is occupied."""
        for i, occupant in enumerate(self._curves):
            if occupant is None:
                self._curves[i] = curve
                handle = Handle(i, self._generations[i])
                logger.debug('Curve with %d nodes placed in slot %d', len(curve), i)
                return handle
        raise CapacityError('All {} curve slots are in use.'.format(self.capacity))

    def create(self, xs=(), ys=(), ts=(), samples=None):
        """Construct a ParametricCurve from control points and parameters (see
        ParametricCurve) and add it to the registry. With no arguments, an
        empty curve is created, ready to have nodes appended."""
        if len(self) >= self.capacity:
            raise CapacityError('All {} curve slots are in use.'.format(self.capacity))
        return self.add(ParametricCurve(xs, ys, ts, samples))

    def _check_index(self, handle):
        index = handle[0]
        if not 0 <= index < self.capacity:
            raise NotFoundError('Slot {} is out of range for a registry of {} slots.'.format(index, self.capacity))
        return index

    def lookup(self, handle):
        """Return the curve referred to by handle.

        Raises NotFoundError if the slot is out of range or empty, or if the
        handle's curve has since been deleted."""
        index = self._check_index(handle)
        curve = self._curves[index]
        if curve is None or self._generations[index] != handle[1]:
            raise NotFoundError('Handle {} does not refer to a current curve.'.format(tuple(handle)))
        return curve

    def handle_at(self, index):
        """Return the current handle for the curve in slot index."""
        self._check_index((index,))
        handle = Handle(index, self._generations[index])
        self.lookup(handle)
        return handle

    def delete(self, handle):
        """Remove the curve referred to by handle.

        Deleting an empty slot, or a handle whose curve was already deleted,
        does nothing. Raises NotFoundError only if the handle's index is out
        of range."""
        index = self._check_index(handle)
        if self._curves[index] is None or self._generations[index] != handle[1]:
            return
        self._vacate(index)

    def _vacate(self, index):
        self._curves[index] = None
        self._generations[index] += 1
        logger.debug('Slot %d vacated', index)

    def clear(self):
        """Delete every curve in the registry."""
        for i, curve in enumerate(self._curves):
            if curve is not None:
                self._vacate(i)

    def extent(self):
        """Return the union (x_min, x_max, y_min, y_max) of the bounding boxes of
        all curves, or None if no curve has any control points."""
        boxes = [curve.bounds for curve in self._curves if curve is not None and curve.bounds is not None]
        if not boxes:
            return None
        x_mins, x_maxes, y_mins, y_maxes = zip(*boxes)
        return min(x_mins), max(x_maxes), min(y_mins), max(y_maxes)
