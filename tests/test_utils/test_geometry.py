"""Tests for the geometry helpers."""

from __future__ import annotations

import numpy as np
from matplotlib.transforms import Affine2D

from tiler.utils.geometry import (
    bbox,
    bounds_overlap,
    compose,
    edge_midpoints,
    inflate,
    polygon_contains,
    then_translate,
    translation_of,
    union_point,
)


def test_compose_applies_child_first():
    parent = Affine2D().translate(10, 0)
    child = Affine2D().scale(2)
    combined = compose(parent, child)
    np.testing.assert_allclose(combined.transform_point((1, 1)), (12, 2))


def test_then_translate_copies():
    base = Affine2D().scale(3)
    moved = then_translate(base, (1.0, 2.0))
    np.testing.assert_allclose(moved.transform_point((1, 1)), (4, 5))
    assert translation_of(base) == (0.0, 0.0)


def test_bbox_and_union():
    pts = np.array([[1.0, 5.0], [-2.0, 3.0], [4.0, -1.0]])
    assert bbox(pts) == (-2.0, -1.0, 4.0, 5.0)
    assert bbox(np.empty((0, 2))) == (0.0, 0.0, 0.0, 0.0)
    assert union_point((0.0, 0.0, 1.0, 1.0), (3.0, -1.0)) == (0.0, -1.0, 3.0, 1.0)


def test_inflate():
    assert inflate((0.0, 0.0, 1.0, 2.0), 2.0, 2.0) == (-2.0, -2.0, 3.0, 4.0)


def test_bounds_overlap_is_strict():
    assert bounds_overlap((0, 0, 2, 2), (1, 1, 3, 3))
    assert not bounds_overlap((0, 0, 1, 1), (1, 0, 2, 1))
    assert not bounds_overlap((0, 0, 1, 1), (5, 5, 6, 6))


def test_polygon_contains():
    square = np.array([[0, 0], [0, 1], [1, 1], [1, 0]], dtype=float)
    assert polygon_contains(square, (0.5, 0.5))
    assert not polygon_contains(square, (1.5, 0.5))
    assert not polygon_contains(square[:2], (0.0, 0.5))


def test_edge_midpoints_close_the_loop():
    tri = np.array([[0, 0], [2, 0], [0, 2]], dtype=float)
    np.testing.assert_allclose(edge_midpoints(tri), [[1, 0], [1, 1], [0, 1]])
