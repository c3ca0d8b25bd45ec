"""Sample rule sets. Rule 0 is an empty placeholder; every sample seeds at ROOT_TILE_ID."""

from __future__ import annotations

import math
from collections.abc import Callable

from matplotlib.transforms import Affine2D

from tiler.tiling.model import ROOT_TILE_ID, Tile, TilePlacement, TilingRule, TilingStep


def _half(dx: float, dy: float) -> Affine2D:
    return Affine2D().scale(0.5).translate(dx, dy)


def square_step() -> TilingStep:
    """Unit square into four half-size squares."""
    children = [
        TilePlacement(ROOT_TILE_ID, _half(0.0, 0.0)),
        TilePlacement(ROOT_TILE_ID, _half(0.5, 0.0)),
        TilePlacement(ROOT_TILE_ID, _half(0.0, 0.5)),
        TilePlacement(ROOT_TILE_ID, _half(0.5, 0.5)),
    ]
    return TilingStep(
        rules=[TilingRule(Tile.empty()), TilingRule(Tile.square(1.0), children)],
        expansion_factor=2.0,
    )


def triangle_step() -> TilingStep:
    """Equilateral triangle into four; the middle child is turned 180°."""
    h = math.sqrt(3.0) / 2.0
    tile = Tile.polygon([(0.0, 0.0), (1.0, 0.0), (0.5, h)])
    children = [
        TilePlacement(ROOT_TILE_ID, _half(0.0, 0.0)),
        TilePlacement(ROOT_TILE_ID, _half(0.5, 0.0)),
        TilePlacement(ROOT_TILE_ID, _half(0.25, h / 2.0)),
        TilePlacement(ROOT_TILE_ID, Affine2D().scale(0.5).rotate_deg(180.0).translate(0.75, h / 2.0)),
    ]
    return TilingStep(
        rules=[TilingRule(Tile.empty()), TilingRule(tile, children)],
        expansion_factor=2.0,
    )


def rhombus_step(angle_deg: float = 60.0) -> TilingStep:
    """Rhombus into four half-size rhombi stepped along its two edge vectors."""
    tile = Tile.rhombus(1.0, angle_deg)
    ux, uy = tile.corners[1]
    vx, vy = tile.corners[3]
    offsets = [(0.0, 0.0), (ux / 2, uy / 2), (vx / 2, vy / 2), ((ux + vx) / 2, (uy + vy) / 2)]
    children = [TilePlacement(ROOT_TILE_ID, _half(float(dx), float(dy))) for dx, dy in offsets]
    return TilingStep(
        rules=[TilingRule(Tile.empty()), TilingRule(tile, children)],
        expansion_factor=2.0,
    )


_SAMPLES: dict[str, Callable[[], TilingStep]] = {
    "square": square_step,
    "triangle": triangle_step,
    "rhombus": rhombus_step,
}


def sample_names() -> list[str]:
    return sorted(_SAMPLES)


def get_sample(name: str) -> TilingStep:
    """Fresh copy of a named sample. Unknown names raise KeyError."""
    return _SAMPLES[name]()
