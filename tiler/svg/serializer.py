"""Write stroke-only SVG output from an emitted tiling path."""

from __future__ import annotations

from matplotlib.path import Path

from tiler.tiling.emitter import path_to_svg_d
from tiler.utils.geometry import Bounds


def serialize_tiling_svg(
    path: Path,
    bounds: Bounds,
    stroke_width: float = 0.3,
    title: str = "",
    precision: int = 4,
) -> str:
    """SVG document with the whole tiling as one unfilled path.

    ``bounds`` becomes the viewBox. Model +y points up, so the content is
    flipped to SVG's y-down frame.
    """
    xmin, ymin, xmax, ymax = bounds
    width = xmax - xmin
    height = ymax - ymin
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="{xmin} {-ymax} {width} {height}" xmlns="http://www.w3.org/2000/svg">',
    ]
    if title:
        lines.append(f"  <title>{title}</title>")

    d = path_to_svg_d(path, precision=precision)
    if d:
        lines.append(
            f'  <path d="{d}" transform="scale(1,-1)" fill="none" stroke="black"'
            f' stroke-width="{stroke_width}" stroke-linejoin="round" />'
        )

    lines.append("</svg>")
    return "\n".join(lines)
