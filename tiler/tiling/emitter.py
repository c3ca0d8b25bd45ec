"""Path emitter: placements to one combined matplotlib Path of closed loops."""

from __future__ import annotations

import numpy as np
from matplotlib.path import Path
from matplotlib.transforms import Affine2D
from numpy.typing import NDArray

from tiler.tiling.model import Tile, TilePlacement, TilingStep


def tile_loop(tile: Tile, transform: Affine2D) -> tuple[NDArray[np.float64], NDArray[np.uint8]] | None:
    """Vertices and codes for one closed loop, or None for an empty tile.

    The CLOSEPOLY vertex repeats the first corner, so a loop has
    ``len(corners) + 1`` vertices.
    """
    if tile.is_empty:
        return None
    pts = tile.transformed_corners(transform)
    verts = np.vstack([pts, pts[:1]])
    codes = np.full(len(verts), Path.LINETO, dtype=Path.code_type)
    codes[0] = Path.MOVETO
    codes[-1] = Path.CLOSEPOLY
    return verts, codes


def placements_to_path(step: TilingStep, placements: list[TilePlacement]) -> Path:
    """One loop per placement with a non-empty tile, in input order."""
    verts_list: list[NDArray[np.float64]] = []
    codes_list: list[NDArray[np.uint8]] = []
    for placement in placements:
        loop = tile_loop(step.rule_for(placement.tile_id).tile, placement.transform)
        if loop is None:
            continue
        verts_list.append(loop[0])
        codes_list.append(loop[1])

    if not verts_list:
        return Path(np.empty((0, 2)), np.empty(0, dtype=Path.code_type))
    return Path(np.concatenate(verts_list), np.concatenate(codes_list))


def loop_count(path: Path) -> int:
    """Number of closed loops in ``path``."""
    if path.codes is None:
        return 0
    return int(np.count_nonzero(path.codes == Path.CLOSEPOLY))


def path_to_svg_d(path: Path, precision: int = 4) -> str:
    """SVG path data with one ``M … Z`` run per loop."""
    if path.codes is None or len(path.vertices) == 0:
        return ""
    parts: list[str] = []
    for (x, y), code in zip(path.vertices, path.codes):
        if code == Path.MOVETO:
            parts.append(f"M{x:.{precision}f} {y:.{precision}f}")
        elif code == Path.LINETO:
            parts.append(f"L{x:.{precision}f} {y:.{precision}f}")
        elif code == Path.CLOSEPOLY:
            parts.append("Z")
    return " ".join(parts)
