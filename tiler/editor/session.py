"""EditorSession: per-frame interaction state over one rule's placement list.

The host calls ``update()`` once per UI frame. Each frame runs, in order:
corner selection, shape selection / drag start, drag application, snapping,
background deselection. Feedback is drawn last, so it reflects this frame's state.
"""

from __future__ import annotations

import logging
import math

from matplotlib.transforms import Affine2D

from tiler.editor.annotations import (
    AXIS_COLOR,
    BASE_TILE_COLOR,
    HOVER_COLOR,
    OUTLINE_COLOR,
    SELECTED_CORNER_COLOR,
    SELECTED_SHAPE_COLOR,
    SNAP_COLOR,
    Annotation,
    Arrow,
    Outline,
    Ring,
)
from tiler.editor.config import EditorConfig
from tiler.editor.drag import DragState
from tiler.editor.hits import FrameHost, HitResponse, HitTarget, point_key, shape_key
from tiler.editor.selection import (
    NONE,
    PointSelection,
    Selection,
    ShapeSelection,
    click_corner,
    click_shape,
    selected_shapes,
)
from tiler.editor.snapping import find_snap, movable_points, snap_targets
from tiler.editor.view import point_rect, screen_rect, to_model
from tiler.tiling.model import TilingRule, TilingStep
from tiler.utils.geometry import apply, bbox, polygon_contains, then_translate

logger = logging.getLogger(__name__)


class EditorSession:
    """Interaction state for one editing session. Created on open, dropped on close."""

    def __init__(self, config: EditorConfig | None = None, snap_enabled: bool = True) -> None:
        self.config = config or EditorConfig()
        self.current_tile = 0
        self.selection: Selection = NONE
        self.drag: DragState | None = None
        self.snap_enabled = snap_enabled
        self.snap_target: tuple[float, float] | None = None

    def select_rule(self, index: int) -> None:
        """Switch the edited rule. Selection and any gesture in progress are dropped."""
        self.current_tile = index
        self.selection = NONE
        self.drag = None
        self.snap_target = None

    def update(self, step: TilingStep, host: FrameHost, view: Affine2D) -> list[Annotation]:
        """Run one frame. Returns the frame's visual annotations."""
        if not 0 <= self.current_tile < len(step.rules):
            self.drag = None
            return []

        rule = step.rules[self.current_tile]
        shift = host.shift_held()
        pointer = host.pointer_pos()
        self.snap_target = None
        interacted = False

        hovered_corners, clicked = self._corner_pass(step, rule, host, view, shift)
        interacted |= clicked

        responses, clicked = self._shape_pass(step, rule, host, view, pointer, shift)
        interacted |= clicked

        if self.drag is not None:
            resp = responses.get(self.drag.anchor)
            if resp is None or resp.drag_stopped or not (resp.dragged or resp.drag_started):
                logger.debug("Drag on placement %d ended", self.drag.anchor)
                self.drag = None
            else:
                interacted = True
                if pointer is not None:
                    self._apply_drag(step, rule, view, pointer, shift)

        if host.background().clicked and not interacted:
            self.selection = NONE

        return self._feedback(step, rule, view, hovered_corners)

    # --- Frame stages ---

    def _corner_pass(
        self,
        step: TilingStep,
        rule: TilingRule,
        host: FrameHost,
        view: Affine2D,
        shift: bool,
    ) -> tuple[list[tuple[int, int]], bool]:
        hovered: list[tuple[int, int]] = []
        clicked = False
        for j, placement in enumerate(rule.result):
            tile = step.rule_for(placement.tile_id).tile
            screen_pts = apply(view, tile.transformed_corners(placement.transform))
            for i, p in enumerate(screen_pts):
                target = HitTarget(point_key(j, i), point_rect((p[0], p[1]), self.config.point_hit_size))
                resp = host.interact(target)
                if resp.hovered:
                    hovered.append((j, i))
                if resp.clicked:
                    clicked = True
                    self.selection = click_corner(self.selection, j, i, shift)
                    logger.debug("Corner click: placement %d corner %d (shift=%s)", j, i, shift)
        return hovered, clicked

    def _shape_pass(
        self,
        step: TilingStep,
        rule: TilingRule,
        host: FrameHost,
        view: Affine2D,
        pointer: tuple[float, float] | None,
        shift: bool,
    ) -> tuple[dict[int, HitResponse], bool]:
        model_pointer = to_model(view, pointer or (0.0, 0.0))
        responses: dict[int, HitResponse] = {}
        clicked = False
        for j, placement in enumerate(rule.result):
            corners = step.rule_for(placement.tile_id).tile.transformed_corners(placement.transform)
            if len(corners) < 3:
                continue
            target = HitTarget(
                shape_key(j),
                screen_rect(view, bbox(corners)),
                hovered=polygon_contains(corners, model_pointer),
            )
            resp = host.interact(target)
            responses[j] = resp
            if resp.clicked:
                clicked = True
                self.selection = click_shape(self.selection, j, shift)
                logger.debug("Shape click: placement %d (shift=%s)", j, shift)
            if resp.drag_started and pointer is not None:
                clicked = True
                self._start_drag(rule, j, pointer, shift)
        return responses, clicked

    def _start_drag(self, rule: TilingRule, j: int, pointer: tuple[float, float], shift: bool) -> None:
        if j not in selected_shapes(self.selection):
            if shift:
                logger.debug("Shift drag on unselected placement %d refused", j)
                return
            self.selection = ShapeSelection((j,))
        snapshots = {k: rule.result[k].transform.frozen() for k in selected_shapes(self.selection)}
        self.drag = DragState(
            anchor=j,
            start_pos=pointer,
            snapshots=snapshots,
            snap_enabled=self.snap_enabled,
        )
        logger.debug("Drag started on placement %d with %d selected", j, len(snapshots))

    def _apply_drag(
        self,
        step: TilingStep,
        rule: TilingRule,
        view: Affine2D,
        pointer: tuple[float, float],
        shift: bool,
    ) -> None:
        drag = self.drag
        if not drag.activated:
            dx, dy = drag.screen_displacement(pointer)
            if math.hypot(dx, dy) <= self.config.drag_threshold:
                return
            drag.activated = True
            logger.debug("Drag activated after %.1f screen units", math.hypot(dx, dy))

        sx, sy = to_model(view, drag.start_pos)
        cx, cy = to_model(view, pointer)
        delta = (cx - sx, cy - sy)
        for k, snapshot in drag.snapshots.items():
            rule.result[k].transform = then_translate(snapshot, delta)

        if not drag.snap_enabled or shift:
            return
        moving = tuple(drag.snapshots)
        match = find_snap(
            snap_targets(step, self.current_tile, moving),
            movable_points(step, self.current_tile, moving),
            self.config.snap_radius,
        )
        if match is None:
            return
        for k in moving:
            rule.result[k].transform = then_translate(rule.result[k].transform, match.offset)
        self.snap_target = match.target
        logger.debug("Snapped selection by (%.4f, %.4f)", *match.offset)

    def _feedback(
        self,
        step: TilingStep,
        rule: TilingRule,
        view: Affine2D,
        hovered_corners: list[tuple[int, int]],
    ) -> list[Annotation]:
        out: list[Annotation] = []

        for a, b in (((-2.0, 0.0), (2.0, 0.0)), ((0.0, -2.0), (0.0, 2.0))):
            sx, sy = view.transform_point(a)
            ex, ey = view.transform_point(b)
            out.append(Arrow((float(sx), float(sy)), (float(ex - sx), float(ey - sy)), AXIS_COLOR))

        if not rule.tile.is_empty:
            out.append(Outline(apply(view, rule.tile.corners), BASE_TILE_COLOR, self.config.base_outline_width))

        hovered = set(hovered_corners)
        for j, placement in enumerate(rule.result):
            tile = step.rule_for(placement.tile_id).tile
            screen_pts = apply(view, tile.transformed_corners(placement.transform))
            for i, p in enumerate(screen_pts):
                center = (float(p[0]), float(p[1]))
                if (j, i) in hovered:
                    out.append(Ring(center, self.config.hover_ring_radius, HOVER_COLOR))
                if isinstance(self.selection, PointSelection) and self.selection.contains(j, i):
                    out.append(Ring(center, self.config.selected_ring_radius, SELECTED_CORNER_COLOR))
            if len(screen_pts):
                selected = isinstance(self.selection, ShapeSelection) and self.selection.contains(j)
                out.append(Outline(screen_pts, SELECTED_SHAPE_COLOR if selected else OUTLINE_COLOR))

        if self.snap_target is not None:
            p = view.transform_point(self.snap_target)
            out.append(Ring((float(p[0]), float(p[1])), self.config.snap_ring_radius, SNAP_COLOR))
        return out
