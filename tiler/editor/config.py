"""Editor tuning: hit region sizes and drag/snap thresholds."""

from __future__ import annotations

from dataclasses import dataclass

from tiler.editor.snapping import DEFAULT_SNAP_RADIUS


@dataclass
class EditorConfig:
    """Tuning for the frame-by-frame interaction protocol."""

    # Screen-space displacement before a press becomes a drag
    drag_threshold: float = 5.0

    # Model-space snap radius (pairs must be strictly closer)
    snap_radius: float = DEFAULT_SNAP_RADIUS

    # Side of the square hit region around each corner, in screen units
    point_hit_size: float = 8.0

    # Feedback rings
    hover_ring_radius: float = 7.0
    selected_ring_radius: float = 8.0
    snap_ring_radius: float = 8.0

    # Outline width of the rule's own tile
    base_outline_width: float = 4.0
