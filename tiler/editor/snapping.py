"""Point snapping for dragged placements.

Candidate points are tile corners plus edge midpoints. Targets come from the
rule's own outline and the placements that are not being dragged; movable
points come from the dragged placements at their current positions.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from matplotlib.transforms import Affine2D
from numpy.typing import NDArray

from tiler.tiling.model import Tile, TilingStep
from tiler.utils.geometry import edge_midpoints

DEFAULT_SNAP_RADIUS = 0.04


@dataclass(frozen=True)
class SnapMatch:
    target: tuple[float, float]
    movable: tuple[float, float]
    distance_sq: float

    @property
    def offset(self) -> tuple[float, float]:
        return (self.target[0] - self.movable[0], self.target[1] - self.movable[1])


def snap_points(tile: Tile, transform: Affine2D) -> NDArray[np.float64]:
    corners = tile.transformed_corners(transform)
    if len(corners) == 0:
        return corners
    return np.vstack([corners, edge_midpoints(corners)])


def _stack(chunks: list[NDArray[np.float64]]) -> NDArray[np.float64]:
    chunks = [c for c in chunks if len(c)]
    return np.vstack(chunks) if chunks else np.empty((0, 2))


def snap_targets(step: TilingStep, rule_id: int, selected: tuple[int, ...]) -> NDArray[np.float64]:
    rule = step.rule_for(rule_id)
    chunks = [snap_points(rule.tile, Affine2D())]
    for j, placement in enumerate(rule.result):
        if j in selected:
            continue
        chunks.append(snap_points(step.rule_for(placement.tile_id).tile, placement.transform))
    return _stack(chunks)


def movable_points(step: TilingStep, rule_id: int, selected: tuple[int, ...]) -> NDArray[np.float64]:
    rule = step.rule_for(rule_id)
    chunks = []
    for j in selected:
        placement = rule.result[j]
        chunks.append(snap_points(step.rule_for(placement.tile_id).tile, placement.transform))
    return _stack(chunks)


def find_snap(
    targets: NDArray[np.float64],
    movable: NDArray[np.float64],
    radius: float = DEFAULT_SNAP_RADIUS,
) -> SnapMatch | None:
    """Closest (target, movable) pair with squared distance below ``radius**2``.

    Ties go to the first pair in row-major (target, movable) order.
    """
    if len(targets) == 0 or len(movable) == 0:
        return None
    diff = targets[:, np.newaxis, :] - movable[np.newaxis, :, :]
    dist_sq = np.sum(diff**2, axis=2)
    flat = int(np.argmin(dist_sq))
    ti, mi = np.unravel_index(flat, dist_sq.shape)
    best = float(dist_sq[ti, mi])
    if not best < radius * radius:
        return None
    return SnapMatch(
        target=(float(targets[ti, 0]), float(targets[ti, 1])),
        movable=(float(movable[mi, 0]), float(movable[mi, 1])),
        distance_sq=best,
    )
