"""Tests for selection transitions."""

from __future__ import annotations

from tiler.editor.selection import (
    NONE,
    NoSelection,
    PointSelection,
    ShapeSelection,
    click_corner,
    click_shape,
    selected_shapes,
)


class TestCornerSelection:
    def test_plain_click_replaces(self):
        sel = click_corner(ShapeSelection((0, 1)), 2, 3, shift=False)
        assert sel == PointSelection(2, (3,))

    def test_shift_click_adds_on_same_placement(self):
        sel = click_corner(PointSelection(2, (3,)), 2, 1, shift=True)
        assert sel == PointSelection(2, (3, 1))

    def test_shift_click_toggles_off(self):
        sel = click_corner(PointSelection(2, (3, 1, 0)), 2, 1, shift=True)
        assert sel == PointSelection(2, (3, 0))

    def test_toggling_last_corner_clears(self):
        assert click_corner(PointSelection(2, (3,)), 2, 3, shift=True) == NONE

    def test_shift_click_on_other_placement_starts_fresh(self):
        sel = click_corner(PointSelection(2, (3, 1)), 0, 1, shift=True)
        assert sel == PointSelection(0, (1,))

    def test_shift_click_from_nothing(self):
        assert click_corner(NONE, 1, 2, shift=True) == PointSelection(1, (2,))


class TestShapeSelection:
    def test_click_then_shift_click_keeps_discovery_order(self):
        sel = click_shape(NONE, 2, shift=False)
        sel = click_shape(sel, 0, shift=True)
        assert sel == ShapeSelection((2, 0))

    def test_shift_click_removes_only_that_index(self):
        sel = click_shape(ShapeSelection((2, 0)), 2, shift=True)
        assert sel == ShapeSelection((0,))

    def test_plain_click_replaces(self):
        assert click_shape(ShapeSelection((2, 0)), 1, shift=False) == ShapeSelection((1,))

    def test_shift_click_over_point_selection_starts_fresh(self):
        assert click_shape(PointSelection(0, (1,)), 3, shift=True) == ShapeSelection((3,))

    def test_toggling_last_shape_clears(self):
        assert isinstance(click_shape(ShapeSelection((1,)), 1, shift=True), NoSelection)


def test_selected_shapes():
    assert selected_shapes(ShapeSelection((1, 3))) == (1, 3)
    assert selected_shapes(PointSelection(1, (0,))) == ()
    assert selected_shapes(NONE) == ()
