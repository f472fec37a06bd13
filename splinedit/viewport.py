# This code is licensed under the MIT License (see LICENSE file for details)

class Viewport:
    def __init__(self, width, height, x_center=0, y_center=0, scale=1):
        """Mapping between window pixels and curve (world) coordinates.

        Parameters:
            width, height: window size in pixels.
            x_center, y_center: world position shown at the window center.
            scale: world units per pixel.

        Pixel coordinates have their origin at the top-left of the window,
        with y increasing downward; world y increases upward.
        """
        self._check_size(width, height)
        if scale <= 0:
            raise ValueError('Viewport scale must be positive.')
        self.width = width
        self.height = height
        self.x_center = x_center
        self.y_center = y_center
        self.scale = scale

    @staticmethod
    def _check_size(width, height):
        if width <= 0 or height <= 0:
            raise ValueError('Viewport size must be positive (got {}x{}).'.format(width, height))

    def __repr__(self):
        return 'Viewport({}x{}, center=({}, {}), scale={})'.format(self.width, self.height,
            self.x_center, self.y_center, self.scale)

    def visible_extent(self):
        """Return the (x_min, x_max, y_min, y_max) world rectangle shown in the window."""
        x_offset = self.scale * self.width / 2
        y_offset = self.scale * self.height / 2
        return (self.x_center - x_offset, self.x_center + x_offset,
            self.y_center - y_offset, self.y_center + y_offset)

    def fit(self, extent, margin=1.1):
        """Center the view on extent = (x_min, x_max, y_min, y_max).

        The scale is chosen from the smaller of the horizontal and vertical
        units-per-pixel ratios, enlarged by margin. If extent is None, or
        has no area in either direction, the view is only re-centered."""
        if extent is None:
            return
        x_min, x_max, y_min, y_max = extent
        self.x_center = (x_min + x_max) / 2
        self.y_center = (y_min + y_max) / 2
        scale = min((x_max - x_min) / self.width, (y_max - y_min) / self.height) * margin
        if scale > 0:
            self.scale = scale

    def screen_to_world(self, px, py):
        x_min, x_max, y_min, y_max = self.visible_extent()
        return x_min + px * self.scale, y_max - py * self.scale

    def world_to_screen(self, x, y):
        x_min, x_max, y_min, y_max = self.visible_extent()
        return (x - x_min) / self.scale, (y_max - y) / self.scale

    def zoom(self, steps=1, factor=1.1):
        """Zoom out by factor per step (negative steps zoom in), keeping the center fixed."""
        self.scale *= factor ** steps

    def pan(self, dx, dy):
        """Shift the view as the pointer is dragged by (dx, dy) pixels, so that
        the content follows the pointer."""
        self.x_center -= dx * self.scale
        self.y_center += dy * self.scale

    def resize(self, width, height):
        """Change the window size, keeping the horizontal world span constant."""
        self._check_size(width, height)
        self.scale *= self.width / width
        self.width = width
        self.height = height
