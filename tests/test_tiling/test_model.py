"""Tests for the tiling data model."""

from __future__ import annotations

import math

import numpy as np
import pytest
from matplotlib.transforms import Affine2D

from tiler.tiling.model import ROOT_TILE_ID, RuleSetError, Tile, TilePlacement, TilingRule, TilingStep


def test_tile_square_corners():
    tile = Tile.square(2.0)
    assert tile.corners.shape == (4, 2)
    np.testing.assert_allclose(tile.corners, [[0, 0], [0, 2], [2, 2], [2, 0]])


def test_tile_rhombus_apex_at_origin():
    tile = Tile.rhombus(1.0, 60.0)
    dy = math.cos(math.radians(30.0))
    np.testing.assert_allclose(tile.corners, [[0, 0], [-0.5, dy], [0, 2 * dy], [0.5, dy]], atol=1e-12)


def test_empty_tile():
    tile = Tile.empty()
    assert tile.is_empty
    assert tile.corners.shape == (0, 2)
    assert tile.transformed_corners(Affine2D().scale(3)).shape == (0, 2)


def test_transformed_corners():
    tile = Tile.square(1.0)
    pts = tile.transformed_corners(Affine2D().scale(2).translate(1, 0))
    np.testing.assert_allclose(pts, [[1, 0], [1, 2], [3, 2], [3, 0]])


def test_placement_copy_is_independent():
    original = TilePlacement(1, Affine2D())
    dup = original.copy()
    dup.transform.translate(5, 5)
    np.testing.assert_allclose(original.transform.get_matrix(), np.eye(3))
    assert dup.tile_id == 1


def test_rule_for_rejects_out_of_range(square):
    assert square.rule_for(ROOT_TILE_ID) is square.rules[ROOT_TILE_ID]
    with pytest.raises(IndexError):
        square.rule_for(2)
    with pytest.raises(IndexError):
        square.rule_for(-1)


def test_validate_accepts_samples(square):
    square.validate()


def test_validate_rejects_dangling_reference():
    step = TilingStep(rules=[TilingRule(Tile.square(), [TilePlacement(3)])], expansion_factor=2.0)
    with pytest.raises(RuleSetError, match="unknown tile id 3"):
        step.validate()


def test_validate_rejects_bad_factor():
    step = TilingStep(rules=[TilingRule(Tile.square())], expansion_factor=0.0)
    with pytest.raises(RuleSetError):
        step.validate()


def test_root_placement_scales_with_levels(square):
    fixed = square.root_placement(0.5, levels=3)
    grown = square.root_placement(0.5, levels=3, scale_with_levels=True)
    assert fixed.tile_id == ROOT_TILE_ID
    assert fixed.transform.get_matrix()[0, 0] == pytest.approx(0.5)
    assert grown.transform.get_matrix()[0, 0] == pytest.approx(4.0)
