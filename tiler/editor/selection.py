"""Editor selection as a closed sum type over none, corners of one placement, or placements.

Transitions are pure functions returning a new selection value.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NoSelection:
    pass


@dataclass(frozen=True)
class PointSelection:
    """Corner indices within one placement of the edited rule."""

    shape: int
    corners: tuple[int, ...]

    def contains(self, shape: int, corner: int) -> bool:
        return self.shape == shape and corner in self.corners


@dataclass(frozen=True)
class ShapeSelection:
    """Placement indices within the edited rule, in the order they were picked."""

    shapes: tuple[int, ...]

    def contains(self, shape: int) -> bool:
        return shape in self.shapes


Selection = NoSelection | PointSelection | ShapeSelection

NONE = NoSelection()


def _toggle(items: tuple[int, ...], item: int) -> tuple[int, ...]:
    if item in items:
        return tuple(x for x in items if x != item)
    return items + (item,)


def click_corner(selection: Selection, shape: int, corner: int, shift: bool) -> Selection:
    """Plain click selects one corner; shift toggles within the same placement only."""
    if shift and isinstance(selection, PointSelection) and selection.shape == shape:
        corners = _toggle(selection.corners, corner)
        return PointSelection(shape, corners) if corners else NONE
    return PointSelection(shape, (corner,))


def click_shape(selection: Selection, shape: int, shift: bool) -> Selection:
    """Plain click selects one placement; shift toggles membership."""
    if shift and isinstance(selection, ShapeSelection):
        shapes = _toggle(selection.shapes, shape)
        return ShapeSelection(shapes) if shapes else NONE
    return ShapeSelection((shape,))


def selected_shapes(selection: Selection) -> tuple[int, ...]:
    """Placements that move when the selection is dragged."""
    if isinstance(selection, ShapeSelection):
        return selection.shapes
    return ()
