"""Leaf-node geometry helpers. No engine imports.

Transforms are matplotlib ``Affine2D`` values; bounds are
``(xmin, ymin, xmax, ymax)`` tuples.
"""

from __future__ import annotations

import numpy as np
from matplotlib.transforms import Affine2D
from numpy.typing import NDArray
from shapely.geometry import Point, Polygon

Bounds = tuple[float, float, float, float]


def compose(parent: Affine2D, child: Affine2D) -> Affine2D:
    """Return ``parent ∘ child``: the child's transform applies first."""
    return Affine2D(parent.get_matrix() @ child.get_matrix())


def then_translate(transform: Affine2D, delta: tuple[float, float]) -> Affine2D:
    """Copy of ``transform`` followed by a translation. Input is not mutated."""
    return transform.frozen().translate(float(delta[0]), float(delta[1]))


def translation_of(transform: Affine2D) -> tuple[float, float]:
    """Image of the local origin."""
    m = transform.get_matrix()
    return (float(m[0, 2]), float(m[1, 2]))


def apply(transform: Affine2D, points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Map an Nx2 point array through ``transform``."""
    if len(points) == 0:
        return np.empty((0, 2))
    return transform.transform(points)


def bbox(points: NDArray[np.float64]) -> Bounds:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def union_point(bounds: Bounds, point: tuple[float, float]) -> Bounds:
    xmin, ymin, xmax, ymax = bounds
    x, y = point
    return (min(xmin, x), min(ymin, y), max(xmax, x), max(ymax, y))


def inflate(bounds: Bounds, dx: float, dy: float) -> Bounds:
    xmin, ymin, xmax, ymax = bounds
    return (xmin - dx, ymin - dy, xmax + dx, ymax + dy)


def bounds_size(bounds: Bounds) -> tuple[float, float]:
    return (bounds[2] - bounds[0], bounds[3] - bounds[1])


def bounds_overlap(a: Bounds, b: Bounds) -> bool:
    """Strict overlap: rectangles that only touch along an edge do not overlap."""
    return a[0] < b[2] and b[0] < a[2] and a[1] < b[3] and b[1] < a[3]


def polygon_contains(corners: NDArray[np.float64], point: tuple[float, float]) -> bool:
    """Point-in-polygon test. Fewer than 3 corners never contain anything."""
    if len(corners) < 3:
        return False
    poly = Polygon(corners)
    if not poly.is_valid:
        poly = poly.buffer(0)
    return bool(poly.contains(Point(point)))


def edge_midpoints(corners: NDArray[np.float64]) -> NDArray[np.float64]:
    """Midpoint of every edge of the closed loop, including the closing edge."""
    if len(corners) < 2:
        return np.empty((0, 2))
    return (corners + np.roll(corners, -1, axis=0)) * 0.5
