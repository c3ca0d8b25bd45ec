"""Model-to-screen view transform for the editor canvas."""

from __future__ import annotations

import numpy as np
from matplotlib.transforms import Affine2D

from tiler.utils.geometry import Bounds

# Model units visible along the shorter canvas side
VIEW_EXTENT = 4.0


def view_transform(width: float, height: float, origin: tuple[float, float] = (0.0, 0.0)) -> Affine2D:
    """Show a VIEW_EXTENT-wide square centred on the model origin, +y up, fitted to the canvas."""
    scale = min(width, height) / VIEW_EXTENT
    cx = origin[0] + width / 2.0
    cy = origin[1] + height / 2.0
    return Affine2D().scale(scale, -scale).translate(cx, cy)


def to_model(view: Affine2D, pos: tuple[float, float]) -> tuple[float, float]:
    x, y = view.inverted().transform_point(pos)
    return (float(x), float(y))


def screen_rect(view: Affine2D, bounds: Bounds) -> Bounds:
    """Screen rectangle covering model-space ``bounds``."""
    corners = np.array([(bounds[0], bounds[1]), (bounds[2], bounds[3])])
    pts = view.transform(corners)
    return (
        float(pts[:, 0].min()),
        float(pts[:, 1].min()),
        float(pts[:, 0].max()),
        float(pts[:, 1].max()),
    )


def point_rect(center: tuple[float, float], size: float) -> Bounds:
    half = size / 2.0
    return (center[0] - half, center[1] - half, center[0] + half, center[1] + half)
