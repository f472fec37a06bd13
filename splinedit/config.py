# This code is licensed under the MIT License (see LICENSE file for details)

from dataclasses import dataclass

from .curve.spline_geometry import DENSE_COUNT
from .registry import MAX_CURVES

@dataclass
class EditorConfig:
    """Settings for an Editor session."""

    # number of curve slots in the registry
    max_curves: int = MAX_CURVES

    # initial window size in pixels
    window_width: int = 500
    window_height: int = 500

    # render samples given to the demo curve
    default_samples: int = 1000

    # scale change per zoom step
    zoom_factor: float = 1.1

    # extra room around the curves when fitting the view
    fit_margin: float = 1.1

    # dense polyline resolution for simplification
    simplify_count: int = DENSE_COUNT


# outline traced by hand; shown at startup by the interactive editor
DEMO_XS = (5.5, 8.5, 10.5, 13, 17, 20.5, 24.5, 28, 32.5, 37.5, 40.5, 42.5, 45, 47,
    49.5, 50.5, 51, 51.5, 52.5, 53, 52.8, 52, 51.5, 53, 54, 55, 56, 55.5, 54.5, 54, 55, 57, 58.5,
    59, 61.5, 62.5, 63.5, 63, 61.5, 59, 55, 53.5, 52.5, 50.5, 49.5, 50, 51, 50.5, 49, 47.5, 46,
    45.5, 45.5, 45.5, 46, 47.5, 47.5, 46, 43, 41, 41.5, 41.5, 41, 39.5, 37.5, 34.5, 31.5, 28, 24,
    21, 18.5, 17.5, 16.5, 15, 13, 10, 8, 6, 6, 6, 5.5, 3.5, 1, 0, 0, 0.5, 1.5, 3.5, 5, 5, 4.5, 4.5, 5.5,
    6.5, 6.5, 5.5)

DEMO_YS = (41, 40.5, 40, 40.5, 41.5, 41.5, 42, 42.5, 43.5, 45, 47, 49.5, 53, 57, 59,
    59.5, 61.5, 63, 64, 64.5, 63, 61.5, 60.5, 61, 62, 63, 62.5, 61.5, 60.5, 60, 59.5, 59, 58.5,
    57.5, 55.5, 54, 53, 51.5, 50, 50, 50.5, 51, 50.5, 47.5, 44, 40.5, 36, 30.5, 28, 25.5, 21.5,
    18, 14.5, 10.5, 7.5, 4, 2.5, 1.5, 2, 3.5, 7, 12.5, 17.5, 22.5, 25, 25, 25, 25.5, 26.5,
    27.5, 27.5, 26.5, 23.5, 21, 19, 17, 14.5, 11.5, 8, 4, 1, 0, 0.5, 3, 6.5, 10, 13, 16.5, 20.5,
    25.5, 29, 33, 35, 36.5, 39, 41)
