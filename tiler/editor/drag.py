"""Drag state for a shape-move gesture.

Snapshots are the pre-drag transforms; every frame recomputes positions from
them, so re-applying the same pointer position is idempotent.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from matplotlib.transforms import Affine2D


@dataclass
class DragState:
    # Placement whose hit region started the gesture
    anchor: int
    # Screen position of the pointer at drag start
    start_pos: tuple[float, float]
    # Pre-drag transform per selected placement index
    snapshots: dict[int, Affine2D] = field(default_factory=dict)
    # False until the pointer has moved past the activation threshold
    activated: bool = False
    snap_enabled: bool = True

    def screen_displacement(self, pos: tuple[float, float]) -> tuple[float, float]:
        return (pos[0] - self.start_pos[0], pos[1] - self.start_pos[1])
