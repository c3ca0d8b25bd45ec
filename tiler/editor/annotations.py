"""Visual feedback records emitted per frame. The host paints them; nothing reads them back."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

# Colours are matplotlib colour names so hosts can pass them through to_rgba()
HOVER_COLOR = "green"
SELECTED_CORNER_COLOR = "darkblue"
OUTLINE_COLOR = "black"
SELECTED_SHAPE_COLOR = "green"
BASE_TILE_COLOR = "lightblue"
AXIS_COLOR = "gray"
SNAP_COLOR = "orange"


@dataclass(frozen=True)
class Ring:
    center: tuple[float, float]
    radius: float
    color: str
    width: float = 1.0


@dataclass(frozen=True, eq=False)
class Outline:
    """Closed polyline in screen space."""

    points: NDArray[np.float64]
    color: str
    width: float = 1.0


@dataclass(frozen=True)
class Arrow:
    start: tuple[float, float]
    vector: tuple[float, float]
    color: str = AXIS_COLOR
    width: float = 1.0


Annotation = Ring | Outline | Arrow
