"""Tile outlines from SVG path data, via svgpathtools."""

from __future__ import annotations

import logging

import numpy as np
from svgpathtools import parse_path

from tiler.tiling.model import Tile

logger = logging.getLogger(__name__)


def tile_from_svg_path(d: str) -> Tile:
    """Build a Tile from the first continuous sub-path of ``d``.

    Corners are segment start points, so curves contribute their endpoints
    only. Coordinates are taken as model coordinates (no y flip).
    """
    path = parse_path(d)
    if len(path) == 0:
        return Tile.empty()

    outline = path.continuous_subpaths()[0]
    corners = [seg.start for seg in outline]
    if not outline.isclosed():
        corners.append(outline.end)

    pts = np.array([(c.real, c.imag) for c in corners], dtype=float)
    logger.debug("Parsed tile with %d corners", len(pts))
    return Tile(pts)
