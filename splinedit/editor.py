# This code is licensed under the MIT License (see LICENSE file for details)

import logging

import numpy

from . import config
from . import datafile
from .curve import spline_geometry
from .registry import CurveRegistry, NotFoundError
from .viewport import Viewport

logger = logging.getLogger(__name__)

class Editor:
    def __init__(self, editor_config=None):
        """State of an interactive curve-editing session.

        The editor owns the curve registry, the view used to turn pointer
        positions into curve coordinates, and the currently selected curve.
        An input layer translates user events into calls on these methods; a
        display layer draws the curves via render().
        """
        if editor_config is None:
            editor_config = config.EditorConfig()
        self.config = editor_config
        self.registry = CurveRegistry(editor_config.max_curves)
        self.viewport = Viewport(editor_config.window_width, editor_config.window_height)
        self.selected = None

    def load_demo(self):
        """Add the built-in demo outline, select it, and fit the view to it."""
        n = len(config.DEMO_XS)
        ts = numpy.linspace(0, 1, n)
        samples = numpy.linspace(0, 1, self.config.default_samples)
        self.selected = self.registry.create(config.DEMO_XS, config.DEMO_YS, ts, samples)
        self.fit_view()
        return self.selected

    def fit_view(self):
        self.viewport.fit(self.registry.extent(), self.config.fit_margin)

    def new_curve(self):
        """Create an empty curve and select it."""
        self.selected = self.registry.create()
        return self.selected

    def select(self, index):
        """Select the curve in slot index. Raises NotFoundError for an empty slot."""
        self.selected = self.registry.handle_at(index)
        return self.selected

    def selected_curve(self):
        if self.selected is None:
            raise NotFoundError('No curve is selected.')
        return self.registry.lookup(self.selected)

    def delete_selected(self):
        if self.selected is None:
            raise NotFoundError('No curve is selected.')
        self.registry.delete(self.selected)
        self.selected = None

    def append_point(self, px, py):
        """Append a node at window pixel (px, py) to the selected curve.

        Returns: the (x, y) world position of the new node."""
        curve = self.selected_curve()
        x, y = self.viewport.screen_to_world(px, py)
        curve.append_node(x, y)
        return x, y

    def _target_curves(self, all_curves):
        if all_curves:
            return self.registry.items()
        return [(self.selected, self.selected_curve())]

    def set_sample_count(self, count, all_curves=False):
        """Resample the selected curve (or every non-empty curve) at count
        evenly-spaced parameters."""
        if count < 2:
            raise ValueError('At least two samples are required.')
        for handle, curve in self._target_curves(all_curves):
            if len(curve):
                curve.resample(count)

    def simplify(self, epsilon, all_curves=False):
        """Replace the samples of the selected curve (or every curve) with a
        Douglas-Peucker simplification to tolerance epsilon."""
        for handle, curve in self._target_curves(all_curves):
            if len(curve) < 2:
                continue
            before = len(curve.samples)
            samples = spline_geometry.simplify_in_place(curve, epsilon, self.config.simplify_count)
            logger.info('Simplified curve %d: %d -> %d samples (epsilon=%g)',
                handle.index, before, len(samples), epsilon)

    def save(self, path):
        datafile.dump(path, self.registry)

    def load(self, path):
        """Replace all curves with those in a file and fit the view to them.

        The selection is cleared as soon as loading starts: the registry is
        emptied even if the file turns out to be malformed."""
        self.selected = None
        handles = datafile.load(path, self.registry)
        self.fit_view()
        return handles

    def render(self, surface):
        """Draw every curve on a display surface.

        The surface must provide draw_polyline(handle, points) and
        draw_control_points(handle, points), each receiving an array of
        shape (n, 2) of world coordinates."""
        for handle, curve in self.registry.items():
            surface.draw_polyline(handle, curve.polyline())
            surface.draw_control_points(handle, curve.control_points)
