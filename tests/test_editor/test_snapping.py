"""Tests for snap candidate search."""

from __future__ import annotations

import numpy as np
from matplotlib.transforms import Affine2D

from tiler.editor.snapping import find_snap, movable_points, snap_points, snap_targets
from tiler.tiling.model import Tile


def test_snap_points_are_corners_and_midpoints():
    pts = snap_points(Tile.square(1.0), Affine2D())
    assert pts.shape == (8, 2)
    assert [0.0, 0.5] in pts.tolist()
    assert [1.0, 1.0] in pts.tolist()


def test_snap_points_of_empty_tile():
    assert len(snap_points(Tile.empty(), Affine2D())) == 0


def test_find_snap_picks_closest_pair():
    targets = np.array([[0.0, 0.0], [1.0, 1.0]])
    movable = np.array([[1.03, 1.0], [0.02, 0.0]])
    match = find_snap(targets, movable, 0.04)
    assert match is not None
    assert match.target == (0.0, 0.0)
    assert match.movable == (0.02, 0.0)
    assert match.offset == (-0.02, 0.0)


def test_find_snap_outside_radius():
    targets = np.array([[0.0, 0.0]])
    movable = np.array([[0.05, 0.0]])
    assert find_snap(targets, movable, 0.04) is None


def test_find_snap_radius_is_strict():
    targets = np.array([[0.0, 0.0]])
    movable = np.array([[0.5, 0.0]])
    assert find_snap(targets, movable, 0.5) is None


def test_find_snap_with_no_candidates():
    assert find_snap(np.empty((0, 2)), np.array([[0.0, 0.0]])) is None
    assert find_snap(np.array([[0.0, 0.0]]), np.empty((0, 2))) is None


def test_targets_exclude_selected(square):
    targets = snap_targets(square, 1, (0, 1, 2, 3))
    # Only the rule's own outline remains
    assert targets.shape == (8, 2)
    assert len(movable_points(square, 1, (0,))) == 8
    assert snap_targets(square, 1, ()).shape == (8 * 5, 2)
